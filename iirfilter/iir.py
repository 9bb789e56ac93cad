"""Recursive (IIR) filtering of a single-channel signal."""

import logging
import numbers

import numpy as np

log = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    pass


class IIRFilter:
    """ Direct-form IIR filter, processing one sample at a time.

    Each output is computed from the current input, the last *order* inputs
    and the last *order* outputs:

        y[n] = (b[0]*x[n] + sum(b[i]*x[n-i] - a[i]*y[n-i])) / a[0]

    where the sum runs over i = 1..order.
    """

    def __init__(self, order):
        if isinstance(order, bool) or not isinstance(order, numbers.Integral):
            raise InvalidArgument('order must be an integer, got %r' % (order,))
        if order < 1:
            raise InvalidArgument('order must be greater than zero')

        self._order = int(order)
        self._a = np.zeros(self._order + 1)
        self._b = np.zeros(self._order + 1)

        # passthrough until configured
        self._a[0] = 1.0
        self._b[0] = 1.0

        self.x_state = np.zeros(self._order)  # most recent first
        self.y_state = np.zeros(self._order)
        log.debug('IIR filter of order %d', self._order)

    @property
    def order(self):
        return self._order

    @property
    def a(self):
        """ Feedback coefficients (a copy). """
        return self._a.copy()

    @property
    def b(self):
        """ Feedforward coefficients (a copy). """
        return self._b.copy()

    def set_coeffs(self, a, b):
        """ Replace feedback (*a*) and feedforward (*b*) coefficients.

        Both sequences must hold exactly *order* values, filling slots
        0..order-1; the last slot (index *order*) is reset to zero.
        a[0] is the output divisor and must not be zero.
        The history is left as is.
        """
        if len(a) != self._order:
            raise InvalidArgument(
                'a must be of size %d, got %d' % (self._order, len(a)))

        if a[0] == 0.0:
            raise InvalidArgument('a[0] must not be zero')

        if len(b) != self._order:
            raise InvalidArgument(
                'b must be of size %d, got %d' % (self._order, len(b)))

        a_ = np.zeros(self._order + 1)
        b_ = np.zeros(self._order + 1)
        a_[:self._order] = a
        b_[:self._order] = b

        self._a, self._b = a_, b_
        log.debug('coefficients set: a=%s b=%s', list(a_), list(b_))

    def process(self, sample):
        """ Filter a single sample, returning the corresponding output. """
        a, b = self._a, self._b
        x_, y_ = self.x_state, self.y_state

        # summed lag by lag, oldest term last
        result = 0.0
        for i in range(1, self._order + 1):
            result += b[i] * x_[i-1] - a[i] * y_[i-1]
        result = (result + b[0] * sample) / a[0]

        self.x_state[1:] = self.x_state[:-1]
        self.y_state[1:] = self.y_state[:-1]
        self.x_state[0] = sample
        self.y_state[0] = result
        return float(result)

    def __call__(self, x):
        for v in x:
            yield self.process(v)

    def reset(self):
        self.x_state[:] = 0.0
        self.y_state[:] = 0.0
        log.debug('IIR filter history cleared')


def lfilter(b, a, x):
    """ Filter *x* from a zero state, using an IIRFilter of order len(a).
        Arguments follow scipy.signal.lfilter: numerator *b* first.
    """
    f = IIRFilter(order=len(a))
    f.set_coeffs(a=a, b=b)
    return np.array(list(f(x)))
