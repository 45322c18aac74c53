import os
import numpy as np

DIRECTORY_FILE = 'directory.txt'
FIND_FILE = 'find.txt'

FIRST_NAMES = [
    "Aaron", "Alice", "Bob", "Carla", "Dmitri", "Elena", "Farid", "Grace", "Hiro", "Ines",
    "Jane", "John", "Kofi", "Lena", "Mateo", "Nadia", "Omar", "Priya", "Quinn", "Rosa",
    "Sven", "Tara", "Umar", "Vera", "Wei", "Ximena", "Yusuf", "Zoe",
]
LAST_NAMES = [
    "Adams", "Baker", "Chen", "Doe", "Evans", "Fischer", "Garcia", "Hughes", "Ivanova", "Jones",
    "Kim", "Lee", "Moreau", "Novak", "Okafor", "Patel", "Quist", "Rossi", "Smith", "Tanaka",
    "Ueda", "Varga", "Walsh", "Xu", "Young", "Zimmer",
]


def load_lines(file_path: str) -> list[str]:
    """
    Reads a text file into a list of lines without trailing newlines.
    Blank lines are skipped. Returns an empty list if the file cannot be read.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return [line.rstrip('\r\n') for line in f if line.strip()]
    except FileNotFoundError:
        print(f"Error: Data file not found at {file_path}")
        return []
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading file {file_path}: {e}")
        return []


def load_phonebook(data_dir: str = '.', directory_file: str = DIRECTORY_FILE,
                   find_file: str = FIND_FILE) -> tuple[list[str], list[str]]:
    """
    Loads the phone book records and the names to look up.
    Relative file names are resolved against `data_dir`.
    Returns:
        A tuple (directory, names_to_find).
    """
    directory = load_lines(os.path.join(data_dir, directory_file))
    names_to_find = load_lines(os.path.join(data_dir, find_file))
    print(f"Loaded {len(directory)} directory records and {len(names_to_find)} names to find.")
    return directory, names_to_find


def generate_phonebook(size: int, num_queries: int, miss_ratio: float = 0.1,
                       seed: int = 42) -> tuple[list[str], list[str]]:
    """
    Generates a synthetic phone book of `size` records ("<phone> <first> <last>")
    and `num_queries` names to find, a `miss_ratio` share of which are absent from the book.
    """
    if size < 0 or num_queries < 0:
        raise ValueError("size and num_queries must be non-negative")
    if not 0.0 <= miss_ratio <= 1.0:
        raise ValueError(f"miss_ratio must be within [0, 1], got {miss_ratio}")

    rng = np.random.default_rng(seed)
    print(f"Generating a phone book with {size} records and {num_queries} queries...")

    # Names may repeat, like in a real phone book
    first_idx = rng.integers(len(FIRST_NAMES), size=size)
    last_idx = rng.integers(len(LAST_NAMES), size=size)
    names = [f"{FIRST_NAMES[f]} {LAST_NAMES[l]}" for f, l in zip(first_idx, last_idx)]

    phones = rng.integers(10_000_000, 99_999_999, size=size)
    directory = [f"{phone} {name}" for phone, name in zip(phones, names)]

    num_misses = int(round(num_queries * miss_ratio)) if size else num_queries
    names_to_find = []
    if size:
        picks = rng.integers(size, size=num_queries - num_misses)
        names_to_find.extend(names[i] for i in picks)
    # Absent names use a surname that never appears in the book
    names_to_find.extend(f"{FIRST_NAMES[rng.integers(len(FIRST_NAMES))]} Missing{i}" for i in range(num_misses))
    rng.shuffle(names_to_find)

    return directory, names_to_find


def write_phonebook(data_dir: str, directory: list[str], names_to_find: list[str],
                    directory_file: str = DIRECTORY_FILE, find_file: str = FIND_FILE) -> None:
    """Writes the records and queries as two line-oriented text files inside `data_dir`."""
    os.makedirs(data_dir, exist_ok=True)
    for file_name, lines in ((directory_file, directory), (find_file, names_to_find)):
        with open(os.path.join(data_dir, file_name), 'w', encoding='utf-8') as f:
            f.writelines(f"{line}\n" for line in lines)
    print(f"Saved {len(directory)} records and {len(names_to_find)} names to {data_dir}.")
