"""
Numeric constants shared across the robust statistics modules.
"""

# 2^-52, spacing of doubles just above 1.0
EPSILON = 1.0 / (1 << 52)

# 2^-26
SQRT_EPS = 1.0 / (1 << 26)

# MAD scale factor for the N(0,1) Gaussian distribution
FACTOR_MAD = 1.48260221850560186054707652936042343132670320259031

# tau-estimator dispersion scale factor for the N(0,1) Gaussian distribution
FACTOR_TAU = 1.0 / 0.962

# Iteration cap for the geometric median solver
MAX_ITERATIONS = 5000
