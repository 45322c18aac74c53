# --- Sequence Helpers ---

def swap(items: list, first: int, second: int) -> None:
    """Exchanges the elements at two positions of a mutable sequence in place."""
    items[first], items[second] = items[second], items[first]


def windowed(items: list, size: int, step: int | None = None, partial: bool = True) -> list[list]:
    """
    Splits a sequence into contiguous windows of `size` elements, a new window
    starting every `step` elements (defaults to `size`, i.e. non-overlapping blocks).
    With `partial` the trailing window may be shorter than `size`; otherwise it is dropped.
    """
    if step is None:
        step = size
    if size <= 0 or step <= 0:
        raise ValueError(f"size and step must be positive, got size={size}, step={step}")

    windows = []
    for start in range(0, len(items), step):
        window = items[start:start + size]
        if len(window) < size and not partial:
            break
        windows.append(window)
    return windows


# --- Record Normalization ---

def normalize_record(record: str) -> str:
    """
    Strips the leading identifier token (e.g. a phone number) from a directory record
    and rejoins the remaining tokens with single spaces.
    """
    return " ".join(record.split()[1:])


def normalize_directory(directory: list[str]) -> list[str]:
    return [normalize_record(record) for record in directory]
