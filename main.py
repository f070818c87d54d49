#!/usr/bin/env python3
from interval import Interval
from endpoint import Closed, Open, Unbound
from coalesce import coalesce

def main():
    pairs = [
        (Interval.build(Open(2), Open(3)), Interval.build(Closed(3), Closed(5))),
        (Interval.build(Open(2), Open(3)), Interval.build(Open(3), Closed(5))),
        (Interval.closed(42, 52), Interval.open(13, 15)),
        (Interval.less_than(0), Interval.at_least(-1)),
        (Interval.empty(), Interval.singleton(7)),
    ]
    for a, b in pairs:
        print(f"{a} ∪ {b} = " + " ∪ ".join(str(i) for i in a.union(b)))
    parts = [
        Interval.closed(1, 2),
        Interval.build(Open(2), Open(4)),
        Interval.singleton(4),
        Interval.build(Closed(10), Unbound),
        Interval.open(6, 6),
    ]
    print(", ".join(str(i) for i in coalesce(parts)))

if __name__ == "__main__":
    main()
