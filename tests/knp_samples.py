# Образцы вывода KNP -tab для тестов

SENTENCE_TARO = """# S-ID:1 KNP:4.2 DATE:2016/02/01 SCORE:-10.52
* 2D <文頭><ガ><助詞><体言><係:ガ格><区切:0-0><格要素><連用要素><正規化代表表記:太郎/たろう><主辞代表表記:太郎/たろう>
+ 2D <文頭><ガ><助詞><体言><係:ガ格><区切:0-0><格要素><連用要素><名詞項候補><先行詞候補><正規化代表表記:太郎/たろう><解析格:ガ>
太郎 たろう 太郎 名詞 6 人名 5 * 0 * 0 "人名:日本:名:45:0.00106 疑似代表表記 代表表記:太郎/たろう" <人名:日本:名:45:0.00106><疑似代表表記><代表表記:太郎/たろう><正規化代表表記:太郎/たろう><文頭><自立><内容語><タグ単位始><文節始>
が が が 助詞 9 格助詞 1 * 0 * 0 NIL <かな漢字><ひらがな><付属>
* 2D <ヲ><助詞><体言><係:ヲ格><区切:0-0><格要素><連用要素><正規化代表表記:パン/ぱん><主辞代表表記:パン/ぱん>
+ 2D <ヲ><助詞><体言><係:ヲ格><区切:0-0><格要素><連用要素><名詞項候補><先行詞候補><正規化代表表記:パン/ぱん><解析格:ヲ>
パン ぱん パン 名詞 6 普通名詞 1 * 0 * 0 "代表表記:パン/ぱん ドメイン:料理・食事 カテゴリ:人工物-食べ物" <代表表記:パン/ぱん><正規化代表表記:パン/ぱん><自立><内容語><タグ単位始><文節始>
を を を 助詞 9 格助詞 1 * 0 * 0 NIL <かな漢字><ひらがな><付属>
* -1D <文末><時制-未来><句点><用言:動><レベル:C><区切:5-5><ID:（文末）><主節><動態述語><正規化代表表記:食べる/たべる><主辞代表表記:食べる/たべる>
+ -1D <文末><時制-未来><句点><用言:動><レベル:C><区切:5-5><ID:（文末）><主節><動態述語><正規化代表表記:食べる/たべる><用言代表表記:食べる/たべる><格関係0:ガ:太郎><格関係1:ヲ:パン><格解析結果:食べる/たべる:動1:ガ/C/太郎/0/0/1;ヲ/C/パン/1/0/1;ニ/U/-/-/-/-;デ/-/-/-/-/-><rel type="ガ" target="太郎" sid="1" id="0"/><rel type="ヲ" target="パン" sid="1" id="1"/>
食べる たべる 食べる 動詞 2 * 0 母音動詞 1 基本形 2 "代表表記:食べる/たべる" <代表表記:食べる/たべる><正規化代表表記:食べる/たべる><かな漢字><活用語><表現文末><自立><内容語><タグ単位始><文節始>
。 。 。 特殊 1 句点 1 * 0 * 0 NIL <英記号><記号><付属>
EOS
"""

SENTENCE_TODAI = """# S-ID:2
* -1D <文頭><文末><体言><正規化代表表記:東京/とうきょう+大学/だいがく>
+ 1D <文頭><地名><正規化代表表記:東京/とうきょう>
東京 とうきょう 東京 名詞 6 地名 4 * 0 * 0 "代表表記:東京/とうきょう 地名:日本:都"
+ -1D <文末><体言><正規化代表表記:大学/だいがく>
大学 だいがく 大学 名詞 6 普通名詞 1 * 0 * 0 "代表表記:大学/だいがく"
EOS
"""

MORPHEME_LINE = '食べる たべる 食べる 動詞 2 * 0 母音動詞 1 基本形 2 "代表表記:食べる/たべる"'
