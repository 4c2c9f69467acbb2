"""Tile quantity math — converts cartons and loose pieces into square feet.

Dimensions are in inches; 144 square inches make one square foot. Every code
path that adds, removes or audits stock uses `calculate_feet`, so create,
update, delete and reconciliation always agree on the amount.
"""

SQUARE_INCHES_PER_FOOT = 144


def per_piece_feet(height: float, width: float) -> float:
    return (height * width) / SQUARE_INCHES_PER_FOOT


def per_carton_feet(height: float, width: float, per_caton_to_pcs: float) -> float:
    return per_piece_feet(height, width) * per_caton_to_pcs


def calculate_feet(
    height: float,
    width: float,
    per_caton_to_pcs: float,
    caton: float = 0,
    pcs: float = 0,
) -> float:
    """Square feet covered by `caton` cartons plus `pcs` loose pieces.

    Raises:
        ValueError: if a dimension or the packing ratio is not positive, or a
            count is negative.
    """
    if height <= 0 or width <= 0 or per_caton_to_pcs <= 0:
        raise ValueError("height, width and per_caton_to_pcs must be greater than 0")
    if caton < 0 or pcs < 0:
        raise ValueError("caton and pcs cannot be negative")

    return (
        per_carton_feet(height, width, per_caton_to_pcs) * caton
        + per_piece_feet(height, width) * pcs
    )
