# -*- coding: utf-8 -*-
"""
チャンク同士の隣接関係（トポロジー）を扱うモジュールです。

トポロジーは「チャンク番号 → 隣接エントリ (相手チャンク, 揃え方) のリスト」
という表で表します。

- build_topology() : チャンク数とバリエーション名から組み込みの表を作る
- Topology.from_descriptor() : 任意のチャンク数の表を明示的に渡す

どちらの場合も、表が対称（A が B を挙げていれば B も A を同じ揃え方で挙げる）
であることを構築時に検査します。
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Sequence, Tuple

from ..config import (
    SUPPORTED_CHUNK_COUNTS, SUPPORTED_VARIANTS, VARIANT_EXTENDED, VARIANT_PLAIN,
)
from ..errors import TopologyError
from ..types import Adjacency, Alignment, Location

ROW = Alignment.ROW
COL = Alignment.COL
TUBE = Alignment.TUBE

# 4チャンクを 2x2 に並べたときの隣接表
#   0 | 1
#   --+--
#   2 | 3
# 横に並ぶチャンク同士は行で、縦に並ぶチャンク同士は列で揃う。
FOUR_CHUNK_PLAIN: Dict[int, Tuple[Tuple[int, Alignment], ...]] = {
    0: ((1, ROW), (2, COL)),
    1: ((0, ROW), (3, COL)),
    2: ((3, ROW), (0, COL)),
    3: ((2, ROW), (1, COL)),
}

# extended では対角のチャンク同士をチューブでつなぐ
FOUR_CHUNK_TUBES: Dict[int, Tuple[Tuple[int, Alignment], ...]] = {
    0: ((3, TUBE),),
    1: ((2, TUBE),),
    2: ((1, TUBE),),
    3: ((0, TUBE),),
}


def _as_adjacency(entry) -> Adjacency:
    if isinstance(entry, Adjacency):
        return entry
    try:
        chunk, alignment = entry
    except (TypeError, ValueError) as e:
        raise TopologyError(f"adjacency entry must be (chunk, alignment), got {entry!r}") from e
    try:
        target = int(chunk)
    except (TypeError, ValueError) as e:
        raise TopologyError(f"target chunk must be an integer in entry {entry!r}") from e
    try:
        return Adjacency(target, Alignment(alignment))
    except ValueError as e:
        raise TopologyError(f"unknown alignment {alignment!r} in entry {entry!r}") from e


class Topology:
    """
    チャンク間の隣接表を保持し、マス同士の隣接判定を行うクラスです。

    Parameters
    ----------
    chunk_count : int
        チャンクの数。
    descriptor : mapping
        チャンク番号 → 隣接エントリ（Adjacency か (chunk, alignment) の組）の並び。
        並び順は候補の列挙順になり、どの解が最初に見つかるかに影響します。
    """

    def __init__(
        self,
        chunk_count: int,
        descriptor: Mapping[int, Iterable],
    ) -> None:
        if chunk_count < 1:
            raise TopologyError(f"chunk count must be positive, got {chunk_count}")
        self.chunk_count = chunk_count
        self._table: Dict[int, Tuple[Adjacency, ...]] = {}
        for chunk, entries in descriptor.items():
            try:
                key = int(chunk)
            except (TypeError, ValueError) as e:
                raise TopologyError(f"chunk key must be an integer, got {chunk!r}") from e
            self._table[key] = tuple(_as_adjacency(e) for e in entries)
        self._validate()

    @classmethod
    def from_descriptor(
        cls,
        descriptor: Mapping[int, Iterable],
        chunk_count: int | None = None,
    ) -> "Topology":
        """明示的な隣接表からトポロジーを作ります。"""
        if chunk_count is None:
            chunk_count = len(descriptor)
        return cls(chunk_count, descriptor)

    def _validate(self) -> None:
        expected = set(range(self.chunk_count))
        if set(self._table) != expected:
            raise TopologyError(
                f"descriptor must list chunks {sorted(expected)}, got {sorted(self._table)}"
            )

        links = set()
        for chunk, entries in self._table.items():
            for adj in entries:
                if adj.chunk not in expected:
                    raise TopologyError(
                        f"chunk {chunk} links to unknown chunk {adj.chunk}"
                    )
                if adj.chunk == chunk:
                    raise TopologyError(f"chunk {chunk} links to itself")
                links.add((chunk, adj.chunk, adj.alignment))

        # 対称性の検査
        for a, b, alignment in links:
            if (b, a, alignment) not in links:
                raise TopologyError(
                    f"asymmetric adjacency: chunk {a} lists ({b}, {alignment.value}) "
                    f"but chunk {b} does not list ({a}, {alignment.value})"
                )

    def adjacents(self, chunk: int) -> Tuple[Adjacency, ...]:
        """チャンク ``chunk`` の隣接エントリを、表に書かれた順で返します。"""
        return self._table[chunk]

    def adjacent(self, a: Location, b: Location) -> bool:
        """
        マス a とマス b が隣接しているかどうかを返します。

        a のチャンクの隣接エントリのうち、b のチャンクを指すものが
        1つでも条件（行・列・チューブ）を満たせば隣接とみなします。
        """
        for adj in self._table[a.chunk]:
            if adj.chunk != b.chunk:
                continue
            if adj.alignment is ROW and a.row == b.row:
                return True
            if adj.alignment is COL and a.col == b.col:
                return True
            if adj.alignment is TUBE and a.row == b.row and a.col == b.col:
                return True
        return False

    def as_descriptor(self) -> Dict[int, Sequence[Tuple[int, str]]]:
        """JSON にしやすい形（chunk → [(chunk, "row"), ...]）で表を返します。"""
        return {
            chunk: [(adj.chunk, adj.alignment.value) for adj in entries]
            for chunk, entries in self._table.items()
        }

    def __repr__(self) -> str:
        return f"Topology(chunk_count={self.chunk_count}, table={self.as_descriptor()})"


def build_topology(chunk_count: int, variant: str = VARIANT_PLAIN) -> Topology:
    """
    チャンク数とバリエーション名から、組み込みの隣接表を持つトポロジーを作ります。

    現在サポートしているのは 4 チャンク（2x2）だけです。
    それ以外のチャンク数は Topology.from_descriptor() で表を渡してください。
    """
    if variant not in SUPPORTED_VARIANTS:
        raise TopologyError(
            f"unknown variant {variant!r}; expected one of {list(SUPPORTED_VARIANTS)}"
        )
    if chunk_count not in SUPPORTED_CHUNK_COUNTS:
        raise TopologyError(
            f"no built-in topology for {chunk_count} chunks; "
            f"supported chunk counts: {list(SUPPORTED_CHUNK_COUNTS)}"
        )

    descriptor = {chunk: list(entries) for chunk, entries in FOUR_CHUNK_PLAIN.items()}
    if variant == VARIANT_EXTENDED:
        for chunk, tubes in FOUR_CHUNK_TUBES.items():
            descriptor[chunk].extend(tubes)

    return Topology(chunk_count, descriptor)
