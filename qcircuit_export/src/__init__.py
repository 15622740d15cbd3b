"""Export pipeline stages: parsing, circuit model, layout and emission."""
