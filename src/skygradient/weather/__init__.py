"""Weather provider adapters and unit conversions."""
