"""Library layer: pure emoji core, config, measurement and display helpers."""
