# Global flag for Numba's fastmath option
FASTMATH = False

# Run the relation consistency check when an algebra is built
CHECK_RELATIONS = True

# Term order used when none is given ("lex", "deglex" or "degrevlex")
DEFAULT_ORDER = "deglex"

# Bounds of the per-algebra monomial product memo and the per-order key cache
PRODUCT_CACHE_SIZE = 2**16
ORDER_KEY_CACHE_SIZE = 2**16
