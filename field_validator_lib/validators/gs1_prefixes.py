"""
GS1 company-prefix registry.

The first three digits of a GTIN/EAN/SSCC identify the GS1 member
organisation (usually a country) that issued the number.  The table below
maps closed ranges of those prefixes to a label; ranges never overlap and
unassigned prefixes have no entry.

The table is sorted once at import time and searched with :mod:`bisect`.
"""

import bisect
from typing import List, Optional, Tuple

from field_validator_lib.exceptions import PrefixTableError

_RESTRICTED = "Distribuição restringida definido pela organização membro GS1"

# (low, high, label) - both ends inclusive
GS1_PREFIX_RANGES: List[Tuple[int, int, str]] = [
    (2, 19, "E.U.A."),
    (20, 29, _RESTRICTED),
    (30, 39, "E.U.A (reservado para medicamentos)"),
    (40, 49, _RESTRICTED),
    (50, 59, "Coupons"),
    (60, 139, "E.U.A."),
    (200, 299, _RESTRICTED),
    (300, 379, "França"),
    (380, 380, "Bulgária"),
    (383, 383, "Eslovénia"),
    (385, 385, "Croácia"),
    (387, 387, "Bósnia e Herzegovina"),
    (400, 440, "Alemanha"),
    (450, 459, "Japão"),
    (460, 469, "Rússia"),
    (470, 470, "Quirguistão"),
    (471, 471, "Ilha de Taiwan"),
    (474, 474, "Estônia"),
    (475, 475, "Letônia"),
    (476, 476, "Azerbaijão"),
    (477, 477, "Lituânia"),
    (478, 478, "Usbequistão"),
    (479, 479, "Sri Lanka"),
    (480, 480, "Filipinas"),
    (481, 481, "Bielorrússia"),
    (482, 482, "Ucrânia"),
    (484, 484, "Moldávia"),
    (485, 485, "Armênia"),
    (486, 486, "Geórgia"),
    (487, 487, "Cazaquistão"),
    (489, 489, "Hong Kong"),
    (490, 499, "Japão"),
    (500, 509, "Reino Unido"),
    (520, 521, "Grécia"),
    (528, 528, "Líbano"),
    (529, 529, "Chipre"),
    (530, 530, "Albânia"),
    (531, 531, "República da Macedônia"),
    (535, 535, "Malta"),
    (539, 539, "República da Irlanda"),
    (540, 549, "Bélgica & Luxemburgo"),
    (560, 560, "Portugal"),
    (569, 569, "Islândia"),
    (570, 579, "Dinamarca"),
    (590, 590, "Polónia"),
    (594, 594, "Romênia"),
    (599, 599, "Hungria"),
    (600, 601, "África do Sul"),
    (603, 603, "Gana"),
    (608, 608, "Bahrein"),
    (609, 609, "Ilhas Maurício"),
    (611, 611, "Marrocos"),
    (613, 613, "Argélia"),
    (616, 616, "Quênia"),
    (618, 618, "Costa do Marfim"),
    (619, 619, "Tunísia"),
    (621, 621, "Síria"),
    (622, 622, "Egito"),
    (624, 624, "Líbia"),
    (625, 625, "Jordânia"),
    (626, 626, "Irã"),
    (627, 627, "Kuwait"),
    (628, 628, "Arábia Saudita"),
    (629, 629, "Emirados Árabes Unidos"),
    (640, 649, "Finlândia"),
    (690, 699, "República Popular da China"),
    (700, 709, "Noruega"),
    (729, 729, "Israel"),
    (730, 739, "Suécia"),
    (740, 740, "Guatemala"),
    (741, 741, "El Salvador"),
    (742, 742, "Honduras"),
    (743, 743, "Nicarágua"),
    (744, 744, "Costa Rica"),
    (745, 745, "Panamá"),
    (746, 746, "República Dominicana"),
    (750, 750, "México"),
    (754, 755, "Canadá"),
    (759, 759, "Venezuela"),
    (760, 769, "Suíça"),
    (770, 770, "Colômbia"),
    (773, 773, "Uruguai"),
    (775, 775, "Peru"),
    (777, 777, "Bolívia"),
    (779, 779, "Argentina"),
    (780, 780, "Chile"),
    (784, 784, "Paraguai"),
    (786, 786, "Equador"),
    (789, 790, "Brasil"),
    (800, 839, "Itália"),
    (840, 849, "Espanha"),
    (850, 850, "Cuba"),
    (858, 858, "Eslováquia"),
    (859, 859, "República Checa"),
    (860, 860, "Sérvia e Montenegro"),
    (865, 865, "Mongólia"),
    (867, 867, "Coreia do Norte"),
    (868, 869, "Turquia"),
    (870, 879, "Holanda"),
    (880, 880, "Coreia do Sul"),
    (884, 884, "Cambodja"),
    (885, 885, "Tailândia"),
    (888, 888, "Singapura"),
    (890, 890, "Índia"),
    (893, 893, "Vietnam"),
    (899, 899, "Indonésia"),
    (900, 919, "Áustria"),
    (930, 939, "Austrália"),
    (940, 949, "Nova Zelândia"),
    (950, 950, "GS1 Global Office"),
    (955, 955, "Malásia"),
    (958, 958, "Macau"),
    (977, 977, "Publicações periódicas seriadas (ISSN)"),
    (978, 979, "International ISBN Agency"),
    (980, 980, "Refund receipts"),
    (981, 982, "Coupons e meios de pagamento"),
    (990, 999, "Coupons"),
]


def _build_index(
    ranges: List[Tuple[int, int, str]]
) -> Tuple[List[int], List[Tuple[int, int, str]]]:
    """
    Sort *ranges* by their lower bound and verify that none overlap.

    Returns the list of lower bounds (the bisect keys) together with the
    sorted ranges.
    """
    ordered = sorted(ranges)
    for low, high, label in ordered:
        if low > high:
            raise PrefixTableError(f"Empty prefix range {low}-{high} ({label})")
    for (low, high, label), (next_low, _, next_label) in zip(ordered, ordered[1:]):
        if next_low <= high:
            raise PrefixTableError(
                f"Prefix ranges overlap: {low}-{high} ({label}) "
                f"and {next_low} ({next_label})"
            )
    return [low for low, _, _ in ordered], ordered


_LOWER_BOUNDS, _SORTED_RANGES = _build_index(GS1_PREFIX_RANGES)


def country_for_prefix(prefix: int) -> Optional[str]:
    """
    Return the issuer label of a 3-digit GS1 prefix.

    >>> country_for_prefix(789)
    'Brasil'
    >>> country_for_prefix(1) is None
    True
    """
    idx = bisect.bisect_right(_LOWER_BOUNDS, prefix) - 1
    if idx < 0:
        return None
    low, high, label = _SORTED_RANGES[idx]
    return label if low <= prefix <= high else None
