import numpy as np


def direct_form(a, b, x):
    """ Whole-signal evaluation of the difference equation, from zero state.
        a and b are full coefficient vectors (index 0 included), and the
        delayed terms are summed one lag at a time, like IIRFilter.process().
    """
    x = np.array(x, dtype=float)
    y = np.zeros(len(x))
    for n in range(len(x)):
        acc = 0.0
        for i in range(1, len(a)):
            x_ = x[n-i] if n >= i else 0.0
            y_ = y[n-i] if n >= i else 0.0
            acc += b[i] * x_ - a[i] * y_
        y[n] = (acc + b[0] * x[n]) / a[0]
    return y


def padded(coeffs):
    """ Coefficients as stored by IIRFilter.set_coeffs(). """
    return [float(c) for c in coeffs] + [0.0]
