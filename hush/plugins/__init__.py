"""Built-in rule-source plugins for hush."""
