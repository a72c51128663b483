import unittest
from knp_tree.core.errors import ParseError
from knp_tree.parsers.juman_parser import JumanParser
from knp_samples import MORPHEME_LINE


class TestJumanParser(unittest.TestCase):
    def setUp(self):
        self.parser = JumanParser()

    def test_basic_fields(self):
        m = self.parser.parse_line(MORPHEME_LINE)

        self.assertEqual(m.surface, "食べる")
        self.assertEqual(m.reading, "たべる")
        self.assertEqual(m.lemma, "食べる")
        self.assertEqual(m.pos, "動詞")
        self.assertEqual(m.pos_id, 2)
        self.assertEqual(m.subpos, "*")
        self.assertEqual(m.conj_type, "母音動詞")
        self.assertEqual(m.conj_form, "基本形")
        self.assertEqual(m.conj_form_id, 2)
        self.assertEqual(m.semantic_info, "代表表記:食べる/たべる")
        self.assertEqual(m.rep_name, "食べる/たべる")

    def test_nil_and_features(self):
        m = self.parser.parse_line("が が が 助詞 9 格助詞 1 * 0 * 0 NIL <かな漢字><ひらがな><付属>")

        self.assertEqual(m.semantic_info, "NIL")
        self.assertEqual(m.features, {"かな漢字": "", "ひらがな": "", "付属": ""})
        self.assertIsNone(m.rep_name)

    def test_rep_name_from_features(self):
        m = self.parser.parse_line("猫 ねこ 猫 名詞 6 普通名詞 1 * 0 * 0 <代表表記:猫/ねこ><漢字>")
        self.assertEqual(m.rep_name, "猫/ねこ")
        self.assertEqual(m.semantic_info, "")

    def test_escaped_space(self):
        m = self.parser.parse_line("\\  \\  \\  特殊 1 空白 6 * 0 * 0 NIL")

        self.assertEqual(m.surface, " ")
        self.assertEqual(m.reading, " ")
        self.assertEqual(m.subpos, "空白")

    def test_callable(self):
        self.assertEqual(self.parser(MORPHEME_LINE), self.parser.parse_line(MORPHEME_LINE))

    def test_illegal_line(self):
        with self.assertRaises(ParseError) as ctx:
            self.parser.parse_line("食べる たべる 食べる 動詞")
        self.assertIn("食べる たべる 食べる 動詞", str(ctx.exception))

        with self.assertRaises(ParseError):
            self.parser.parse_line("食べる たべる 食べる 動詞 x * 0 母音動詞 1 基本形 2")


if __name__ == '__main__':
    unittest.main()
