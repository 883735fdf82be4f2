import numpy as np

from utils import coefficients_from_json, coefficients_to_json, format_term, iter_tokens, read_pairs


class InvalidExponent(ValueError):
    """Raised when a term is constructed with a negative exponent."""

    def __init__(self, exponent):
        super().__init__(f'Exponent must be non-negative, got {exponent}.')
        self.exponent = exponent


def as_coefficient(coef):
    # bool is an int subclass and passes through as 0/1.
    if isinstance(coef, (int, np.integer)):
        return int(coef)
    raise TypeError(f'Coefficients must be integers, got {type(coef)}.')


class Polynomial:
    """
    Represents a polynomial with integer coefficients, stored densely: the
    element at index i is the coefficient of x^i.

    Storage is a numpy array of dtype=object so coefficients are Python
    integers (no overflow) while element-wise arithmetic stays vectorized.

    The length of the storage is part of the value. Trailing zero
    coefficients are never trimmed, and equality is structural: two
    polynomials are equal only if their storages have the same length and
    the same elements, so Polynomial(0, 3) != Polynomial().
    """

    __hash__ = None

    def __init__(self, coef=0, exponent=None, var='x'):
        if isinstance(coef, Polynomial):
            if exponent is not None:
                raise TypeError('An exponent cannot be given when copying a Polynomial.')
            self.coeffs = coef.coeffs.copy()
            self.var = coef.var
            return
        coef = as_coefficient(coef)
        if exponent is None:
            exponent = 0
        if exponent < 0:
            raise InvalidExponent(exponent)
        self.coeffs = np.zeros(exponent + 1, dtype=object)
        self.coeffs[exponent] = coef
        self.var = var

    @classmethod
    def from_coefficients(cls, coefficients, var='x'):
        """Builds a polynomial from coefficients listed by increasing exponent, kept as given."""
        data = [as_coefficient(c) for c in coefficients]
        if not data:
            data = [0]
        return cls._wrap(np.array(data, dtype=object), var)

    @classmethod
    def _wrap(cls, coeffs, var='x'):
        res = cls(var=var)
        res.coeffs = coeffs
        return res

    @staticmethod
    def typecast(other):
        if isinstance(other, Polynomial):
            return other
        if isinstance(other, (int, np.integer)):
            return Polynomial(int(other))
        raise TypeError(f'Type mismatch: Polynomial and {type(other)}.')

    def copy(self):
        return Polynomial(self)

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def assign(self, other):
        """Replaces this polynomial's coefficients with a private copy of other's."""
        other = Polynomial.typecast(other)
        if other.coeffs is self.coeffs:
            return self
        self.coeffs = other.coeffs.copy()
        return self

    # Coefficients as plain ints.
    @property
    def coefficients(self):
        return [int(c) for c in self.coeffs]

    def __len__(self):
        return len(self.coeffs)

    def degree(self):
        # Tracked degree; trailing zeros count.
        return len(self.coeffs) - 1

    def get_coefficient(self, exponent):
        if 0 <= exponent < len(self.coeffs):
            return int(self.coeffs[exponent])
        return 0

    def set_coefficient(self, coef, exponent):
        """
        Sets the coefficient of x^exponent, growing the storage with zeros when
        exponent is past the current end. Negative exponents are ignored.
        """
        coef = as_coefficient(coef)
        if exponent < 0:
            return
        size = len(self.coeffs)
        if exponent >= size:
            grown = np.zeros(exponent + 1, dtype=object)
            grown[:size] = self.coeffs
            self.coeffs = grown
        self.coeffs[exponent] = coef

    def __getitem__(self, exponent):
        return self.get_coefficient(exponent)

    def __setitem__(self, exponent, coef):
        self.set_coefficient(coef, exponent)

    def add(self, other):
        other = Polynomial.typecast(other)
        s_len, o_len = len(self.coeffs), len(other.coeffs)
        if s_len > o_len:
            res = self.coeffs.copy()
            res[:o_len] = res[:o_len] + other.coeffs
        else:
            res = other.coeffs.copy()
            res[:s_len] = res[:s_len] + self.coeffs
        return Polynomial._wrap(res, self.var)

    def subtract(self, other):
        other = Polynomial.typecast(other)
        s_len, o_len = len(self.coeffs), len(other.coeffs)
        if s_len > o_len:
            res = self.coeffs.copy()
            res[:o_len] = res[:o_len] - other.coeffs
        else:
            # Left side padded with zeros up to the right side's length.
            res = np.zeros(o_len, dtype=object)
            res[:s_len] = self.coeffs
            res = res - other.coeffs
        return Polynomial._wrap(res, self.var)

    def multiply(self, other):
        other = Polynomial.typecast(other)
        a = self.coeffs
        b = other.coeffs
        res = np.zeros(len(a) + len(b) - 1, dtype=object)
        for i, coef in enumerate(a):
            if coef != 0:
                res[i:i + len(b)] += coef * b
        return Polynomial._wrap(res, self.var)

    def equals(self, other):
        other = Polynomial.typecast(other)
        return len(self.coeffs) == len(other.coeffs) and bool(np.array_equal(self.coeffs, other.coeffs))

    def __add__(self, other):
        try:
            return self.add(other)
        except TypeError:
            return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        try:
            return self.subtract(other)
        except TypeError:
            return NotImplemented

    def __rsub__(self, other):
        try:
            return Polynomial.typecast(other).subtract(self)
        except TypeError:
            return NotImplemented

    def __mul__(self, other):
        try:
            return self.multiply(other)
        except TypeError:
            return NotImplemented

    __rmul__ = __mul__

    def __neg__(self):
        return Polynomial._wrap(-self.coeffs, self.var)

    def __iadd__(self, other):
        res = self.__add__(other)
        if res is NotImplemented:
            return res
        return self.assign(res)

    def __isub__(self, other):
        res = self.__sub__(other)
        if res is NotImplemented:
            return res
        return self.assign(res)

    def __imul__(self, other):
        res = self.__mul__(other)
        if res is NotImplemented:
            return res
        return self.assign(res)

    def __eq__(self, other):
        try:
            return self.equals(other)
        except TypeError:
            return NotImplemented

    def __ne__(self, other):
        res = self.__eq__(other)
        if res is NotImplemented:
            return res
        return not res

    def to_text(self):
        """
        Highest exponent first, zero terms skipped, with a single leading space:
        ' +5x^3 -2x^2 -4'. An all-zero polynomial prints as ' 0'.
        """
        terms = [format_term(exponent, int(coef), self.var)
                 for exponent, coef in reversed(list(enumerate(self.coeffs)))
                 if coef != 0]
        if not terms:
            return ' 0'
        return ' ' + ''.join(terms)

    __str__ = to_text

    def __repr__(self):
        return f'Polynomial({self.coefficients!r})'

    def write(self, stream):
        stream.write(self.to_text())
        return stream

    def parse_terms(self, tokens):
        """
        Applies (coefficient, exponent) pairs read from tokens through
        set_coefficient until the -1 -1 terminator. tokens is either a string
        or an iterator of string tokens; an iterator is left positioned right
        after the terminator so it can be shared between several reads.
        """
        if isinstance(tokens, str):
            tokens = tokens.split()
        for coef, exponent in read_pairs(tokens):
            self.set_coefficient(coef, exponent)
        return self

    def read(self, stream):
        """Reads terms from a text stream, leaving everything after the terminator unread."""
        return self.parse_terms(iter_tokens(stream))

    def to_json(self):
        return coefficients_to_json(self.coeffs)

    @classmethod
    def from_json(cls, json_string):
        return cls.from_coefficients(coefficients_from_json(json_string))
