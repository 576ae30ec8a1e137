"""Pure computation engine: growth series, solver, strategy projection."""
