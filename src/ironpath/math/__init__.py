"""Pure arithmetic: units, rounding, 1RM estimation, wave and pace math."""
