from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wecc.point import Point

LOGGER = getLogger(__name__)


def k_point(k: int, P: 'Point') -> 'Point':
    ''' ECSM (elliptic curve scalar multiplication) of k*P by binary expansion (double-and-add):
            scan k from the least significant bit, doubling the running multiple of P each step and
            accumulating it whenever the bit is set. Takes O(log k) point additions.
    '''
    if not isinstance(k, int) or isinstance(k, bool):
        raise TypeError(f'Scalar must be an integer, got {type(k).__name__}')
    if k < 0:
        raise ValueError(f'Scalar must be non-negative, got {k}')

    Q = type(P).infinity(P.a, P.b)
    current = P
    coef = k

    while coef:
        if coef & 1:
            Q = Q + current
        current = current + current
        coef >>= 1

    LOGGER.debug('%d*%s = %s (%d bits)', k, P, Q, k.bit_length())
    return Q
