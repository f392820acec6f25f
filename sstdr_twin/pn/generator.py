"""Maximal-length PN code generator for SSTDR probing signals."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from scipy.signal import max_len_seq

from sstdr_twin.config import MAX_PN_BITS, MIN_PN_BITS, Modulation
from sstdr_twin.errors import GenerationError
from sstdr_twin.models import GenerationResult, GeneratorSettings


def generate_pn_code(
    *,
    modulation: Modulation | str,
    carrier_freq: float,
    chip_rate: float,
    sample_rate: float,
    pn_bits: int,
    polynomial: Sequence[int],
    magnitude: float,
) -> GenerationResult:
    """Generate one period of a maximal-length PN sequence.

    The LFSR defined by ``polynomial`` (exponents, highest first, ending in 0)
    is run from the all-ones state for ``2**pn_bits - 1`` chips. Chips map
    ``0 -> +magnitude`` and ``1 -> -magnitude`` and are held for
    ``sample_rate / chip_rate`` samples each. Sine modulation multiplies the
    held chips by a carrier at ``carrier_freq``.

    Raises GenerationError for any parameter the sequence cannot be built from.
    """

    try:
        modulation = Modulation(modulation)
    except ValueError as exc:
        raise GenerationError(f"Unsupported modulation: {modulation!r}") from exc
    if chip_rate <= 0 or sample_rate <= 0:
        raise GenerationError(f"Rates must be positive (chip_rate={chip_rate}, sample_rate={sample_rate})")
    if magnitude <= 0:
        raise GenerationError(f"magnitude must be positive, got {magnitude}")
    if carrier_freq < 0 or (modulation is Modulation.SINE and carrier_freq == 0):
        raise GenerationError(f"Invalid carrier_freq {carrier_freq} for {modulation.value} modulation")
    if not MIN_PN_BITS <= pn_bits <= MAX_PN_BITS:
        raise GenerationError(f"pn_bits must be in [{MIN_PN_BITS}, {MAX_PN_BITS}], got {pn_bits}")

    taps = _taps_from_polynomial(pn_bits, polynomial)
    interp_factor = interpolation_factor(chip_rate, sample_rate)
    pn_length = 2**pn_bits - 1

    bits = _maximal_length_bits(pn_bits, taps, pn_length, polynomial)
    chips = np.where(bits == 0, float(magnitude), -float(magnitude))
    waveform = np.repeat(chips, interp_factor)
    if modulation is Modulation.SINE:
        t = np.arange(waveform.size, dtype=float) / sample_rate
        waveform = waveform * np.sin(2.0 * np.pi * carrier_freq * t)
    chips.setflags(write=False)
    waveform.setflags(write=False)

    return GenerationResult(
        pn_sequence_length=pn_length,
        total_duration=pn_length / chip_rate,
        settings=GeneratorSettings(
            interpolation_factor=interp_factor,
            taps=taps,
            modulation=modulation,
        ),
        pn_sequence=chips,
        waveform=waveform,
    )


def interpolation_factor(chip_rate: float, sample_rate: float) -> int:
    """Return samples per chip, requiring an exact integer ratio."""

    ratio = sample_rate / chip_rate
    factor = int(round(ratio))
    if factor < 1 or not math.isclose(ratio, factor, rel_tol=0.0, abs_tol=1e-9):
        raise GenerationError(
            f"sample_rate ({sample_rate} Hz) must be an integer multiple of chip_rate ({chip_rate} Hz)"
        )
    return factor


def _taps_from_polynomial(pn_bits: int, polynomial: Sequence[int]) -> tuple[int, ...]:
    exponents = [int(value) for value in polynomial]
    if len(exponents) < 3:
        raise GenerationError(f"Polynomial {exponents} needs the degree, at least one tap and 0")
    if exponents[0] != pn_bits or exponents[-1] != 0:
        raise GenerationError(f"Polynomial {exponents} is not of degree {pn_bits} with a constant term")
    if any(a <= b for a, b in zip(exponents, exponents[1:])):
        raise GenerationError(f"Polynomial {exponents} exponents must be strictly decreasing")
    return tuple(exponents[1:-1])


def _maximal_length_bits(
    pn_bits: int,
    taps: tuple[int, ...],
    pn_length: int,
    polynomial: Sequence[int],
) -> np.ndarray:
    initial = np.ones(pn_bits, dtype=np.int8)
    bits, final = max_len_seq(pn_bits, state=initial.copy(), length=pn_length, taps=list(taps))
    # A maximal sequence returns to its seed after exactly 2**n - 1 steps and no sooner.
    if not np.array_equal(final, initial) or any(
        np.array_equal(bits, np.roll(bits, period)) for period in _maximal_proper_divisors(pn_length)
    ):
        raise GenerationError(
            f"Polynomial {list(polynomial)} does not generate a maximal-length sequence for {pn_bits} bits"
        )
    return bits


def _maximal_proper_divisors(value: int) -> list[int]:
    """Return ``value // p`` for each prime ``p`` dividing ``value``.

    Every proper divisor of ``value`` divides one of these, so a shorter
    period shows up as a period of one of them.
    """

    primes = []
    remaining = value
    candidate = 2
    while candidate * candidate <= remaining:
        if remaining % candidate == 0:
            primes.append(candidate)
            while remaining % candidate == 0:
                remaining //= candidate
        candidate += 1
    if remaining > 1:
        primes.append(remaining)
    return [value // prime for prime in primes]
