"""Quickstart example for currencylex.

Demonstrates currency unit replacement on top of a message lookup:

1. Catalog hits and missing keys falling back to the message
2. Standalone vs embedded units
3. Runtime changes to the currency symbol
4. CLDR-derived symbols via Babel
5. Custom configuration

Python 3.13+.
"""

from __future__ import annotations

from currencylex import (
    CatalogLookup,
    CldrCurrencyParams,
    CurrencyConfig,
    CurrencyMessageSource,
    replace_currency_units,
)

catalogs = {
    "zh-CN": {"app": {"Hello": "你好", "currency": "元", "balance": "余额：{amount}元"}},
    "en": {"app": {"balance": "Balance: {amount} dollars"}},
}
lookup = CatalogLookup(catalogs)
params = {"currency_symbol": "￥"}
source = CurrencyMessageSource(lookup, params)

# Example 1: Catalog hits and fallback
print("=" * 50)
print("Example 1: Catalog Hits and Fallback")
print("=" * 50)

print(source.translate("app", "Hello", "zh-CN"))
# Output: 你好
print(source.translate("app", "currency", "zh-CN"))
# Output: ￥
print(source.translate("app", "用户名", "zh-CN"))
# Output: 用户名
print(source.translate("app", "余额100元", "zh-CN"))
# Output: 余额100￥
print(source.translate("app", "balance", "en-GB"))
# Output: Balance: {amount} ￥

# Example 2: Standalone vs embedded units
print("\n" + "=" * 50)
print("Example 2: Standalone vs Embedded Units")
print("=" * 50)

for text in ["化学元素", "售价50元。", ":{user_gift}元<", "yuanbao", "100 yuan"]:
    print(f"{text!r:>20} -> {replace_currency_units(text, ['元', 'yuan'])!r}")

# Example 3: Symbol read on every call
print("\n" + "=" * 50)
print("Example 3: Runtime Symbol Change")
print("=" * 50)

params["currency_symbol"] = "RMB "
print(source.translate("app", "balance", "zh-CN"))
# Output: 余额：{amount}RMB
params.pop("currency_symbol")
print(source.translate("app", "balance", "zh-CN"))
# Output: 余额：{amount}￥ (default symbol)

# Example 4: CLDR symbols
print("\n" + "=" * 50)
print("Example 4: CLDR Symbols via Babel")
print("=" * 50)

usd_source = CurrencyMessageSource(lookup, CldrCurrencyParams("USD", "en_US"))
print(usd_source.translate("app", "balance", "en"))
# Output: Balance: {amount} $

# Example 5: Custom configuration
print("\n" + "=" * 50)
print("Example 5: Custom Configuration")
print("=" * 50)

config = CurrencyConfig(currency_units=("EUR", "euros"), default_currency_symbol="€")
eur_source = CurrencyMessageSource(lookup, config=config)
print(eur_source.translate("app", "Pay 20 euros today", "en"))
# Output: Pay 20 € today
print(CurrencyMessageSource(lookup, params, config=config.disabled()).translate(
    "app", "Pay 20 euros today", "en"
))
# Output: Pay 20 euros today
