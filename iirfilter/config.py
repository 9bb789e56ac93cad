"""Configuration class."""

from . import iir


class Configuration:
    order = 1
    a = [1.0]  # feedback coefficients, a[0] is the output divisor
    b = [1.0]  # feedforward coefficients

    def __init__(self, **kwargs):
        self.__dict__.update(**kwargs)

        self.a = [float(v) for v in self.a]
        self.b = [float(v) for v in self.b]
        self.taps = self.order + 1

        # validation only: raises InvalidArgument on a bad configuration
        self.create()

    def create(self):
        f = iir.IIRFilter(order=self.order)
        f.set_coeffs(a=self.a, b=self.b)
        return f


# Filters with fixed coefficients (the last slot is always zero)
presets = {
    'identity': Configuration(),
    'gain': Configuration(order=1, a=[1.0], b=[2.0]),
    'difference': Configuration(order=2, a=[1, 0], b=[1, -1]),
    'moving_average': Configuration(order=4, a=[1, 0, 0, 0], b=[0.25] * 4),
    'smoothing': Configuration(order=2, a=[1, -0.9], b=[0.1, 0]),
    'dc_blocker': Configuration(order=2, a=[1, -0.995], b=[1, -1]),
}


def default():
    return presets['identity']
