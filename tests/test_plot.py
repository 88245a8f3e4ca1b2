import os
import sys

ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import plot  # noqa: E402
from tapblock.components.session_record import SessionRecord  # noqa: E402


def test_finished_scores_skips_open_sessions():
    records = [
        SessionRecord(start_time=1.0, width=10, height=16, colors=4, end_time=2.0, final_score=9),
        SessionRecord(start_time=3.0, width=10, height=16, colors=4),
        SessionRecord(start_time=4.0, width=8, height=8, colors=3, end_time=5.0, final_score=0),
    ]

    indices, scores, labels = plot.finished_scores(records)

    assert indices.tolist() == [0, 2]
    assert scores.tolist() == [9, 0]
    assert labels == ["10x16/4", "8x8/3"]
