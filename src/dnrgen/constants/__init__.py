"""Named constants shared across dnrgen modules."""
