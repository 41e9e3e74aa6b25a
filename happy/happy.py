""" Basics of the "happy" number sequence. See <https://en.wikipedia.org/wiki/Happy_number>

    Repeatedly replace a number by the sum of the squares of its digits: a happy number ends up at 1,
    every other number ends up going round in the cycle 4 => 16 => 37 => 58 => 89 => 145 => 42 => 20 => 4.

    @requires: numpy
    
    @author: phinc-tank
"""
import sys

import numpy as np


UNHAPPY_CYCLE = (4, 16, 37, 58, 89, 145, 42, 20) # In iteration order, 20 => 4


def _check_integer(n, minimum=None):
    """ @return: n as a plain int, if it is an integer >= minimum (if given) """
    if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)):
        raise TypeError("expected an integer, got %r"%(n,))
    if (minimum is not None) and (n < minimum):
        raise ValueError("expected an integer >= %d, got %d"%(minimum, n))
    return int(n) # numpy scalars would overflow in the arithmetic below


def num2digits(xyz):
    """ Splits a number xyz into its digits, returns [x,y,z] """
    xyz = _check_integer(xyz, 0)
    digits = [int(d) for d in str(xyz)]
    return digits


def digit_square_sum(n):
    """ @return: the sum of the squares of the decimal digits of n >= 0 e.g. 123 => 1+4+9 = 14 """
    n = _check_integer(n, 0)
    total = 0
    while (n > 0):
        n, digit = divmod(n, 10)
        total += digit*digit
    return total


def is_happy(n, verbose=False):
    """ Follows n => digit_square_sum(n) => ... until it either reaches 1 or comes back to a number already seen.
        @param n: a positive integer.
        @param verbose: True to print every step along the way.
        @return: True if n is a happy number """
    n = _check_integer(n, 1)
    seen = set()
    while (n != 1):
        if (n in seen): # Going round in circles
            if verbose:
                print(f"not happy after {len(seen)} iterations")
            return False
        seen.add(n)
        next_n = digit_square_sum(n)
        if verbose:
            print(n, num2digits(n), "=>", next_n)
        n = next_n
    if verbose:
        print("happy!")
    return True


def happy_orbit(n):
    """ @return: [n, f(n), f(f(n)), ...] up to the first 1, or up to just before the first repeat """
    n = _check_integer(n, 1)
    orbit = [n]
    seen = {n}
    while (n != 1):
        n = digit_square_sum(n)
        if (n in seen):
            break
        orbit.append(n)
        seen.add(n)
    return orbit


def happy_numbers(nmax):
    """ @return: all happy numbers 1..nmax in ascending order """
    nmax = _check_integer(nmax)
    return [n for n in range(1, nmax+1) if is_happy(n)]


if __name__ == "__main__": # Running as stand-alone program
    for arg in (sys.argv[1:] or ["19"]):
        is_happy(int(arg), verbose=True)
