"""Bloch sphere calculations for single-qubit payloads.

A payload is either an explicit ``[x, y, z]`` vector or a single-qubit
statevector ``|psi> = a|0> + b|1>`` flattened to reals. Both are reduced to
a ``BlochVector`` that never leaves the unit sphere.
"""
from math import sqrt
from typing import List, Sequence, Tuple

from ..models.models import BlochPayload, BlochType, BlochVector


class InvalidInputError(ValueError):
    pass


def decode_amplitudes(statevector: Sequence[float]) -> Tuple[complex, complex]:
    """Decode ``statevector`` into the amplitude pair ``(alpha, beta)``.

    Four values are read as ``[Re a, Im a, Re b, Im b]``, two values as the
    real amplitudes ``[a, b]``. Any other length is read positionally from
    the first four values, missing entries taken as 0.
    """
    if len(statevector) < 2:
        raise InvalidInputError(
            "Statevector must have at least 2 components for single qubit"
        )

    if len(statevector) == 4:
        alpha_real, alpha_imag, beta_real, beta_imag = statevector
    elif len(statevector) == 2:
        alpha_real, beta_real = statevector
        alpha_imag = beta_imag = 0.0
    else:
        padded: List[float] = list(statevector[:4]) + [0.0] * (4 - len(statevector))
        alpha_real, alpha_imag, beta_real, beta_imag = padded

    return complex(alpha_real, alpha_imag), complex(beta_real, beta_imag)


def statevector_to_bloch(statevector: Sequence[float]) -> BlochVector:
    """Convert a statevector to (unnormalized) Bloch sphere coordinates.

    x = 2 Re(a* b), y = 2 Im(a* b), z = |a|^2 - |b|^2
    """
    alpha, beta = decode_amplitudes(statevector)
    overlap = alpha.conjugate() * beta
    return BlochVector(
        x=2 * overlap.real,
        y=2 * overlap.imag,
        z=(alpha.real**2 + alpha.imag**2) - (beta.real**2 + beta.imag**2),
    )


def normalize_bloch_vector(vector: BlochVector) -> BlochVector:
    magnitude = vector.magnitude

    # |0> state
    if magnitude == 0:
        return BlochVector(x=0.0, y=0.0, z=1.0)

    if magnitude <= 1:
        return vector

    return BlochVector(
        x=vector.x / magnitude,
        y=vector.y / magnitude,
        z=vector.z / magnitude,
    )


def process_bloch_data(payload: BlochPayload) -> BlochVector:
    """Convert a bloch payload from the jobs API to a normalized vector."""
    if payload.type == BlochType.VECTOR:
        if len(payload.data) < 3:
            raise InvalidInputError("Bloch vector must have 3 components [x, y, z]")
        x, y, z = payload.data[:3]
        return normalize_bloch_vector(BlochVector(x=x, y=y, z=z))

    if payload.type == BlochType.STATEVECTOR:
        return normalize_bloch_vector(statevector_to_bloch(payload.data))

    raise InvalidInputError(f"Unsupported Bloch data type: {payload.type}")


def is_positional_statevector(payload: BlochPayload) -> bool:
    """True for statevector payloads decoded by position (length not 2 or 4)."""
    return payload.type == BlochType.STATEVECTOR and len(payload.data) not in (2, 4)
