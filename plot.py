"""Plot final scores of finished sessions from the session log.

Usage: python plot.py [path/to/session_log.json]
"""
import sys
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from tapblock.constants import SESSION_LOG_PATH  # noqa: E402
from tapblock.systems.session_log_system import load_session_log  # noqa: E402


def finished_scores(records):
    """Return (session index, final score, board label) arrays for finished sessions."""
    indices, scores, labels = [], [], []
    for index, record in enumerate(records):
        if record.final_score is None:
            continue
        indices.append(index)
        scores.append(record.final_score)
        labels.append(f"{record.width}x{record.height}/{record.colors}")
    return np.array(indices), np.array(scores), labels


def main():
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else SESSION_LOG_PATH
    records = load_session_log(path)
    indices, scores, labels = finished_scores(records)
    if scores.size == 0:
        print(f"No finished sessions in {path}")
        return

    plt.figure(figsize=(7, 4))
    for label in sorted(set(labels)):
        mask = np.array([item == label for item in labels])
        plt.plot(indices[mask], scores[mask], marker="o", linestyle="-", label=label)
    plt.axhline(0, color="gray", linestyle="--", label="Perfect clear")
    plt.title("Blocks left per finished session")
    plt.xlabel("Session")
    plt.ylabel("Blocks left (lower is better)")
    plt.legend()
    plt.grid(True)
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
