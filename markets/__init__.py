"""Market records that feed the probability chart."""
