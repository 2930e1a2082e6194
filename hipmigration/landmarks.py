"""
Landmark roles for the Reimers migration measurement.

The index of a point in the store encodes its anatomical role, so the
order below is fixed and must match the marking order in the UI.
"""

from enum import Enum, IntEnum


class Landmark(IntEnum):
    """Anatomical role of each of the eight marked points"""
    RIGHT_TRIRADIATE = 0
    LEFT_TRIRADIATE = 1
    RIGHT_PERKINS = 2
    LEFT_PERKINS = 3
    RIGHT_HEAD_LATERAL = 4
    RIGHT_HEAD_MEDIAL = 5
    LEFT_HEAD_LATERAL = 6
    LEFT_HEAD_MEDIAL = 7


LANDMARK_COUNT = len(Landmark)


class Side(Enum):
    RIGHT = "right"
    LEFT = "left"


# side -> (perkins index, (first edge index, second edge index))
SIDE_LANDMARKS = {
    Side.RIGHT: (Landmark.RIGHT_PERKINS,
                 (Landmark.RIGHT_HEAD_LATERAL, Landmark.RIGHT_HEAD_MEDIAL)),
    Side.LEFT: (Landmark.LEFT_PERKINS,
                (Landmark.LEFT_HEAD_LATERAL, Landmark.LEFT_HEAD_MEDIAL)),
}

DEFAULT_LABELS = {
    'en': [
        "Right triradiate cartilage",
        "Left triradiate cartilage",
        "Right acetabular lateral edge (Perkins)",
        "Left acetabular lateral edge (Perkins)",
        "Right femoral head lateral edge",
        "Right femoral head medial edge",
        "Left femoral head lateral edge",
        "Left femoral head medial edge",
    ],
    'es': [
        "Cartílago trirradiado derecho",
        "Cartílago trirradiado izquierdo",
        "Borde lateral acetábulo derecho (Perkins)",
        "Borde lateral acetábulo izquierdo (Perkins)",
        "Borde lateral cabeza femoral derecha",
        "Borde medial cabeza femoral derecha",
        "Borde lateral cabeza femoral izquierda",
        "Borde medial cabeza femoral izquierda",
    ],
}

DEFAULT_PROMPTS = {
    'en': {'mark': "Mark: {label}", 'complete': "Measurement complete"},
    'es': {'mark': "Marcar: {label}", 'complete': "Medición completa"},
}


def next_step_label(count, labels=None, prompts=None):
    """Return the instruction for the next point given how many are marked.

    Args:
        count: number of points currently in the store
        labels: sequence of eight role labels (English defaults if omitted)
        prompts: dict with 'mark' (a format string taking ``label``) and
            'complete' entries
    """
    labels = labels or DEFAULT_LABELS['en']
    prompts = prompts or DEFAULT_PROMPTS['en']
    if 0 <= count < len(labels):
        return prompts['mark'].format(label=labels[count])
    return prompts['complete']
