from functools import partial

from natcmp import bytewise_nondigit_compare, natural_compare, natural_comparison_key

file_names = [
    f"{prefix}{number:0{width}d}.{suffix}"
    for prefix in ("file", "File", "IMG_", "track-")
    for number in range(0, 1000, 7)
    for width in (1, 4)
    for suffix in ("txt", "JPG")
]


def test_compare_long_numbers(benchmark):
    a = "version" + "9" * 500 + ".1"
    b = "VERSION" + "9" * 500 + ".2"
    result = benchmark(lambda: natural_compare(a, b))
    assert result == -1


def test_sort_file_names(benchmark):
    result = benchmark(lambda: sorted(file_names, key=natural_comparison_key))
    assert len(result) == len(file_names)


def test_sort_file_names_case_sensitive(benchmark):
    key = partial(natural_comparison_key, strategy=bytewise_nondigit_compare)
    result = benchmark(lambda: sorted(file_names, key=key))
    assert len(result) == len(file_names)
