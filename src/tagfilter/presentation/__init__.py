"""tagfilter presentation layer (pytest plugin)."""
