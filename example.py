from datetime import date

from fx_overview import FxOverview, exchange_rate_overview

print(FxOverview.__version__)  # 0.1.0

# Cached network lookups (files land in ./rates-cache)
with FxOverview(cache_dir="rates-cache") as fx:
    print(fx.rate("USD", "GBP", date(2021, 3, 8)))

    summary = fx.overview("USD", "GBP", date(2021, 3, 1), date(2021, 3, 31))
    print(summary.describe())

# Any callable works as a provider, handy for offline experiments
summary = exchange_rate_overview(
    "AAA",
    "BBB",
    date(2021, 3, 1),
    date(2021, 3, 5),
    lambda _from, _to, day: float(day.day),
)
print(summary)
# => ExchangeSummary(mean_rate=3.0, min_rate=RateSample(value=1.0, ...), ...)
