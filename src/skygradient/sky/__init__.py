"""Day phase classification and sky gradient composition."""
