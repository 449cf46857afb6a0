# SPDX-FileCopyrightText: 2026 Jiri Vyskocil
# SPDX-License-Identifier: Apache-2.0

"""Tests for cluster segmentation and width estimation."""

import itertools
import unittest

from emojiseg.lib.core.segment import count_width, iter_clusters, pair_flags, segment

A, U, E = 0x1F1E6, 0x1F1FA, 0x1F1EA
WOMAN, MAN, HEART, ZWJ, VS16 = 0x1F469, 0x1F468, 0x2764, 0x200D, 0xFE0F
BLACK_FLAG, TAG_CANCEL = 0x1F3F4, 0xE007F
SCOTLAND_TAGS = [0xE0067, 0xE0062, 0xE0073, 0xE0063, 0xE0074]

# Well-formed emoji sequences, each one rendered glyph.
WELL_FORMED = [
    [0x1F602],
    [A, U],
    [0x23, VS16, 0x20E3],
    [WOMAN, ZWJ, HEART, VS16, ZWJ, MAN],
    [WOMAN, ZWJ, WOMAN, ZWJ, 0x1F466, ZWJ, 0x1F466],
    [BLACK_FLAG, *SCOTLAND_TAGS, TAG_CANCEL],
    [0x1F44B, 0x1F3FD],
    [0x1F9D1, 0x1F3FF, ZWJ, 0x1F37C],
    [0x1F3F3, VS16, ZWJ, 0x26A7, VS16],
    [0x2764, VS16],
]


def _clusters(points):
    return list(iter_clusters(points))


class SegmentTests(unittest.TestCase):
    def test_empty_input(self) -> None:
        self.assertEqual(_clusters([]), [])

    def test_single_emoji(self) -> None:
        self.assertEqual(_clusters([0x1F602]), [[0x1F602]])

    def test_plain_text_one_point_per_cluster(self) -> None:
        self.assertEqual(_clusters([ord("a"), ord("b")]), [[ord("a")], [ord("b")]])

    def test_two_letter_flag(self) -> None:
        self.assertEqual(_clusters([A, U]), [[A, U]])

    def test_three_flag_letters_stay_together(self) -> None:
        self.assertEqual(_clusters([A, U, U]), [[A, U, U]])
        self.assertEqual(_clusters([A, A, U]), [[A, A, U]])

    def test_flag_then_content_splits(self) -> None:
        self.assertEqual(_clusters([A, U, 0x1F602]), [[A, U], [0x1F602]])
        self.assertEqual(_clusters([0x1F602, A, U]), [[0x1F602], [A, U]])

    def test_flag_letter_with_vs16_is_content(self) -> None:
        self.assertEqual(_clusters([A, VS16, U, E]), [[A, VS16], [U, E]])

    def test_keycap(self) -> None:
        self.assertEqual(_clusters([0x23, VS16, 0x20E3]), [[0x23, VS16, 0x20E3]])
        self.assertEqual(
            _clusters([0x23, VS16, 0x20E3, 0x1F602]), [[0x23, VS16, 0x20E3], [0x1F602]]
        )

    def test_zwj_continuation(self) -> None:
        seq = [WOMAN, ZWJ, HEART, ZWJ, MAN]
        self.assertEqual(_clusters(seq), [seq])

    def test_zwj_sequence_then_qualified_emoji(self) -> None:
        self.assertEqual(
            _clusters([WOMAN, ZWJ, HEART, ZWJ, MAN, 0x1F5E3, VS16]),
            [[WOMAN, ZWJ, HEART, ZWJ, MAN], [0x1F5E3, VS16]],
        )

    def test_tag_sequence(self) -> None:
        seq = [BLACK_FLAG, *SCOTLAND_TAGS, TAG_CANCEL]
        self.assertEqual(_clusters(seq + [0x1F233]), [seq, [0x1F233]])

    def test_skin_tone_attaches(self) -> None:
        self.assertEqual(_clusters([0x1F44B, 0x1F3FD, 0x1F44B]), [[0x1F44B, 0x1F3FD], [0x1F44B]])

    def test_leading_modifier_forms_own_cluster(self) -> None:
        self.assertEqual(_clusters([VS16, 0x1F602]), [[VS16], [0x1F602]])

    def test_segment_alias(self) -> None:
        self.assertIs(segment, iter_clusters)

    def test_is_lazy_and_restartable(self) -> None:
        seq = [0x1F602, A, U, WOMAN, ZWJ, MAN]
        gen = iter_clusters(seq)
        self.assertEqual(next(gen), [0x1F602])
        gen.close()
        self.assertEqual(_clusters(seq), _clusters(seq))

    def test_accepts_tuples(self) -> None:
        self.assertEqual(_clusters((A, U)), [[A, U]])


class PartitionPropertyTests(unittest.TestCase):
    def _samples(self):
        alphabet = [A, U, VS16, ZWJ, 0x1F3FD, 0xE0067, TAG_CANCEL, 0x20E3, 0x23, WOMAN, ord("x")]
        for n in range(0, 4):
            yield from itertools.product(alphabet, repeat=n)

    def test_clusters_partition_input(self) -> None:
        for sample in self._samples():
            clusters = _clusters(list(sample))
            self.assertTrue(all(clusters), sample)
            self.assertEqual([p for c in clusters for p in c], list(sample))

    def test_minimum_width(self) -> None:
        for sample in self._samples():
            width = count_width(list(sample))
            if sample:
                self.assertGreaterEqual(width, 1, sample)
            else:
                self.assertEqual(width, 0)


class CountWidthTests(unittest.TestCase):
    def test_empty(self) -> None:
        self.assertEqual(count_width([]), 0)

    def test_single_glyphs_are_one(self) -> None:
        for seq in WELL_FORMED:
            self.assertEqual(count_width(seq), 1, seq)

    def test_two_glyphs(self) -> None:
        self.assertEqual(count_width([0x1F602, 0x1F602]), 2)
        self.assertEqual(count_width([A, U, 0x1F602]), 2)

    def test_flag_letters_round_up(self) -> None:
        self.assertEqual(count_width([A]), 1)
        self.assertEqual(count_width([A, U, E]), 2)
        self.assertEqual(count_width([A, U, E, U]), 2)

    def test_modifier_only_is_minimum(self) -> None:
        self.assertEqual(count_width([VS16]), 1)
        self.assertEqual(count_width([ZWJ]), 1)

    def test_whole_equals_sum_of_clusters(self) -> None:
        for combo in itertools.product(WELL_FORMED, repeat=3):
            seq = [p for part in combo for p in part]
            total = sum(count_width(c) for c in iter_clusters(seq))
            self.assertEqual(count_width(seq), total, seq)

    def test_malformed_input_may_differ_from_cluster_sum(self) -> None:
        for seq in ([VS16, 0x1F602], [A, ZWJ, 0x1F602]):
            clusters = list(iter_clusters(seq))
            self.assertEqual(count_width(seq), 1, seq)
            self.assertEqual([count_width(c) for c in clusters], [1, 1], seq)


class PairFlagsTests(unittest.TestCase):
    def test_pairs_three_letters(self) -> None:
        self.assertEqual(pair_flags([A, U, U]), [[A, U], [U]])

    def test_even_run(self) -> None:
        self.assertEqual(pair_flags([A, U, E, U]), [[A, U], [E, U]])

    def test_pairing_is_positional(self) -> None:
        self.assertEqual(pair_flags([A, A, U]), [[A, A], [U]])

    def test_non_flag_cluster_unchanged(self) -> None:
        seq = [WOMAN, ZWJ, MAN]
        self.assertEqual(pair_flags(seq), [seq])

    def test_segment_then_pair(self) -> None:
        groups = [g for c in iter_clusters([A, U, U]) for g in pair_flags(c)]
        self.assertEqual(groups, [[A, U], [U]])


if __name__ == "__main__":
    unittest.main()
