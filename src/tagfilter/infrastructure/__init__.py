"""tagfilter infrastructure layer."""
