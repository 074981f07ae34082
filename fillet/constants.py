"""Fillet solver constants."""

# Decimal places used when comparing endpoints and the fillet span
ROUND_DIGITS = 7

# Fillets sweeping exactly this many degrees are ambiguous and rejected;
# wider results are flipped to the minor arc
MAX_SPAN_DEG = 180.0
