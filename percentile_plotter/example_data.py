"""
Example data generator for the Percentile Chart Plotter.

Creates synthetic sample CSV files for testing and demonstration:

- ``response_times.csv``: request id + response time (ms), a
  log-normal body with a slow tail, so the percentile curve has a
  visible knee near the 90th percentile.
- ``order_dates.csv``: one column of order timestamps spread over a
  quarter (temporal sample).
"""

import math
import os
import random
from datetime import datetime, timedelta


def generate_example_csvs(output_dir: str, *, n_rows: int = 500) -> dict:
    """Generate the example CSV files in *output_dir*.

    Returns
    -------
    dict
        ``{"response_times": path, "order_dates": path}``
    """
    os.makedirs(output_dir, exist_ok=True)

    # Reproducible randomness
    rng = random.Random(42)

    # ── Response times: log-normal body + 5% slow tail ───────────────
    times = []
    for _ in range(n_rows):
        ms = rng.lognormvariate(math.log(120.0), 0.35)
        if rng.random() < 0.05:
            ms += rng.uniform(400.0, 1500.0)
        times.append(round(ms, 1))

    response_path = os.path.join(output_dir, 'response_times.csv')
    with open(response_path, 'w', encoding='utf-8', newline='') as fh:
        fh.write('Request,"Response time [#,0.0 ms]"\n')
        for i, ms in enumerate(times, start=1):
            fh.write(f'{i},{ms}\n')

    # ── Order timestamps over one quarter ────────────────────────────
    start = datetime(2026, 1, 1)
    span_seconds = 90 * 24 * 3600
    stamps = sorted(
        start + timedelta(seconds=rng.randint(0, span_seconds))
        for _ in range(n_rows)
    )

    dates_path = os.path.join(output_dir, 'order_dates.csv')
    with open(dates_path, 'w', encoding='utf-8', newline='') as fh:
        fh.write('Order date [yyyy-MM-dd]\n')
        for stamp in stamps:
            fh.write(stamp.isoformat(sep=' ') + '\n')

    return {
        'response_times': response_path,
        'order_dates': dates_path,
    }


if __name__ == '__main__':
    import tempfile
    out_dir = os.path.join(tempfile.gettempdir(), 'percentile_plotter_example')
    paths = generate_example_csvs(out_dir)
    for name, path in paths.items():
        size = os.path.getsize(path)
        print(f"  {name}: {path} ({size:,} bytes)")
