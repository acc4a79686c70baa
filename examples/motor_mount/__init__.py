"""Motor Mount example -- an owning component built on FlightConfigurableParameterSet."""
