"""Pure emoji core (classification, segmentation, labels, probe) and config."""
