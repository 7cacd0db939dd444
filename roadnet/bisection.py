"""Univariate minimisation by the bisection method."""


def bisection_method(derivative, a, b, epsilon=1e-15):
    """Return the minimum of a ditonic function on [a, b] within +/- epsilon.

    The first argument is the derivative of the function to be minimised.
    """
    if a > b:
        raise ValueError(f"empty interval -- [{a}, {b}]")
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive -- {epsilon}")

    if derivative(a) >= 0:
        return a
    if derivative(b) <= 0:
        return b

    while b - a > 2 * epsilon:
        midpoint = (b + a) / 2
        if not a < midpoint < b:
            break
        if derivative(midpoint) <= 0:
            a = midpoint
        else:
            b = midpoint
    return (b + a) / 2