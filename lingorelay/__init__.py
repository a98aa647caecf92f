"""LingoRelay: bilingual chat relay with cascading translation providers."""
