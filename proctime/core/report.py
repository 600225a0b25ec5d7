from __future__ import annotations

from typing import Iterable, Tuple

from proctime.types import Duration, TimingSample


LABEL_WIDTH = 8


def report_fields(sample: TimingSample) -> Iterable[Tuple[str, Duration]]:
	return (
		("real", sample.real),
		("system", sample.system),
		("user", sample.user_time),
	)


def format_report(sample: TimingSample) -> str:
	return "".join(f"{label:<{LABEL_WIDTH}}{duration.render()}\n" for label, duration in report_fields(sample))
