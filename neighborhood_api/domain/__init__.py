"""Pure domain rules (records, validation, error taxonomy)."""
