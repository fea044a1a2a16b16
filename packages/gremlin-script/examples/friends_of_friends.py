"""
Пример сборки скрипта через построитель.

Usage:
  set GREMLIN_SCRIPT_NAMESPACE_VALUE=demo
  python packages/gremlin-script/examples/friends_of_friends.py
"""

from __future__ import annotations

from gremlin_script import anonymous, encode, g
from gremlin_script import steps as s


def main() -> None:
    friends = s.both(anonymous(), "knows")
    graph = s.has_namespace(s.v(g(), 1))
    graph = s.repeat(graph, s.simple_path(friends))
    graph = s.append_step(graph, "times", 2)
    graph = s.by(s.group_count(graph), "name")

    print(encode(graph))


if __name__ == "__main__":
    main()
