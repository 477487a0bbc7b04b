"""Sieves and modular arithmetic helpers."""

from math import gcd


def smallest_prime_factors(limit: int) -> list[int]:
    """Return the smallest prime factor of every integer below ``limit``.

    Index ``0`` holds ``0`` and index ``1`` holds ``1``.
    """
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    spf = list(range(limit))
    for even in range(4, limit, 2):
        spf[even] = 2
    candidate = 3
    while candidate * candidate < limit:
        if spf[candidate] == candidate:
            for multiple in range(candidate * candidate, limit, candidate):
                if spf[multiple] == multiple:
                    spf[multiple] = candidate
        candidate += 1
    return spf


def primes_up_to(n: int) -> list[int]:
    """Return every prime not greater than ``n``, in increasing order."""
    if n < 2:
        return []
    is_prime = [True] * (n + 1)
    p = 2
    while p * p <= n:
        if is_prime[p]:
            for multiple in range(p * p, n + 1, p):
                is_prime[multiple] = False
        p += 1
    return [value for value in range(2, n + 1) if is_prime[value]]


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent`` modulo ``modulus``; a zero exponent gives ``1``."""
    if modulus < 1:
        raise ValueError(f"modulus must be positive, got {modulus}")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if exponent == 0:
        return 1
    return pow(base, exponent, modulus)


def mod_inverse(value: int, prime: int) -> int:
    """Return the inverse of ``value`` modulo the prime ``prime``."""
    if prime < 2:
        raise ValueError(f"modulus must be a prime, got {prime}")
    if value % prime == 0:
        raise ValueError(f"{value} has no inverse modulo {prime}")
    return power_mod(value, prime - 2, prime)


def ncr_mod(n: int, r: int, prime: int) -> int:
    """Return the binomial coefficient ``C(n, r)`` modulo the prime ``prime``."""
    if r < 0:
        raise ValueError(f"r must be non-negative, got {r}")
    if n < r:
        return 0
    if r == 0:
        return 1
    factorials = [1] * (n + 1)
    for i in range(1, n + 1):
        factorials[i] = factorials[i - 1] * i % prime
    return (
        factorials[n]
        * mod_inverse(factorials[r], prime)
        % prime
        * mod_inverse(factorials[n - r], prime)
        % prime
    )


def mod_add(a: int, b: int, m: int) -> int:
    """Return ``a + b`` reduced into ``0..m-1``."""
    return (a + b) % m


def mod_sub(a: int, b: int, m: int) -> int:
    """Return ``a - b`` reduced into ``0..m-1``."""
    return (a - b) % m


def mod_mul(a: int, b: int, m: int) -> int:
    """Return ``a * b`` reduced into ``0..m-1``."""
    return (a % m) * (b % m) % m


def mod_div(a: int, b: int, m: int) -> int:
    """Return ``a / b`` modulo the prime ``m``."""
    return mod_mul(a, mod_inverse(b % m, m), m)


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)