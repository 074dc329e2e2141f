"""Human readable elapsed time."""


def format_elapsed(seconds: float) -> str:
    """Format a duration the way the run report shows it.

    Durations under one second read as "a jiffy".
    """
    elapsed = int(seconds)
    if elapsed <= 0:
        return "a jiffy"
    return f"{elapsed // 3600}hrs {(elapsed // 60) % 60}min {elapsed % 60}sec"
