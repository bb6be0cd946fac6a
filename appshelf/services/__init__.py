# services package
# appinfo loading and caching
