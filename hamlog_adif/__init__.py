"""Hamlog CSV to ADIF conversion pipeline."""
