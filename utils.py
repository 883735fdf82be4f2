import json
import warnings

# Input terminator: a (coefficient, exponent) pair equal to this ends a polynomial.
SENTINEL = (-1, -1)


def format_term(exponent, coef, var='x'):
    """
    Renders one non-zero term in the stream format: '+5x^3 ', '-2x ', '+4'.
    Positive values get an explicit '+', negative ones keep their own sign.
    """
    sign = '+' if coef > 0 else ''
    if exponent == 0:
        return f'{sign}{coef}'
    if exponent == 1:
        return f'{sign}{coef}{var} '
    return f'{sign}{coef}{var}^{exponent} '


def iter_tokens(stream):
    """
    Yields whitespace separated tokens, reading one character at a time.
    Reading stops at the whitespace that ends a token, so after the last token
    a caller asked for, the rest of the stream is left unread.
    """
    token = []
    while True:
        char = stream.read(1)
        if char and not char.isspace():
            token.append(char)
            continue
        if token:
            yield ''.join(token)
            token = []
        if not char:
            return


def read_pairs(tokens):
    """
    Yields (coefficient, exponent) pairs from an iterator of tokens until the
    sentinel pair. The sentinel itself is consumed and not yielded.
    """
    tokens = iter(tokens)
    while True:
        try:
            coef = int(next(tokens))
        except StopIteration:
            warnings.warn('Input ended before the -1 -1 terminator.', RuntimeWarning, stacklevel=2)
            return
        try:
            exponent = int(next(tokens))
        except StopIteration:
            warnings.warn('Input ended in the middle of a term; dropping it.', RuntimeWarning, stacklevel=2)
            return
        if (coef, exponent) == SENTINEL:
            return
        yield coef, exponent


def coefficients_to_json(coefficients):
    """Serializes a coefficient list (index = exponent) into a JSON string."""
    return json.dumps({'coefficients': [int(c) for c in coefficients]})


def coefficients_from_json(json_string):
    data = json.loads(json_string)
    return [int(c) for c in data['coefficients']]
