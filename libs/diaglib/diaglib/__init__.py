"""diaglib: accumulate, order and propagate error and warning diagnostics."""
