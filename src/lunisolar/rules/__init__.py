"""Field and unit rules over EastAsianDate."""
