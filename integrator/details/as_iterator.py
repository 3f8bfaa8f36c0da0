from typing import Hashable, Iterable, Iterator, List, Set, Tuple, TypeVar, Union

T = TypeVar("T", bound=Hashable)


# Accept a single string or a container of strings (e.g. archs="arm64")...
def str_iter(strings: Union[str, List[str], Set[str], Tuple[str, ...]]) -> Iterator[str]:
    if isinstance(strings, (list, set, tuple)):
        for v in strings:
            assert isinstance(v, str)
            yield v
    else:
        assert isinstance(strings, str)
        yield strings


# Drop repeated values, the first occurrence keeps its position...
def unique(values: Iterable[T]) -> List[T]:
    seen: Set[T] = set()
    result: List[T] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


# Drop None and empty strings...
def compact(values: Iterable[T]) -> List[T]:
    return [v for v in values if v is not None and v != ""]
