"""Price series analyzers."""
