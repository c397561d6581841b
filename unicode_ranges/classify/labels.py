# Generated by unicode_ranges.classify.gen_labels from unicode_blocks.txt and unicode_scripts.txt.
# Do not edit by hand, rerun: python -m unicode_ranges.classify.gen_labels

from unicode_ranges.classify.ranges import RangeLabel


class Block(RangeLabel):
    """Unicode character blocks, in code point order."""

    BASIC_LATIN = "Basic Latin"
    LATIN_1_SUPPLEMENT = "Latin-1 Supplement"
    LATIN_EXTENDED_A = "Latin Extended-A"
    LATIN_EXTENDED_B = "Latin Extended-B"
    IPA_EXTENSIONS = "IPA Extensions"
    SPACING_MODIFIER_LETTERS = "Spacing Modifier Letters"
    COMBINING_DIACRITICAL_MARKS = "Combining Diacritical Marks"
    GREEK_AND_COPTIC = "Greek and Coptic"
    CYRILLIC = "Cyrillic"
    CYRILLIC_SUPPLEMENT = "Cyrillic Supplement"
    ARMENIAN = "Armenian"
    HEBREW = "Hebrew"
    ARABIC = "Arabic"
    SYRIAC = "Syriac"
    ARABIC_SUPPLEMENT = "Arabic Supplement"
    THAANA = "Thaana"
    NKO = "NKo"
    SAMARITAN = "Samaritan"
    MANDAIC = "Mandaic"
    ARABIC_EXTENDED_A = "Arabic Extended-A"
    DEVANAGARI = "Devanagari"
    BENGALI = "Bengali"
    GURMUKHI = "Gurmukhi"
    GUJARATI = "Gujarati"
    ORIYA = "Oriya"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    KANNADA = "Kannada"
    MALAYALAM = "Malayalam"
    SINHALA = "Sinhala"
    THAI = "Thai"
    LAO = "Lao"
    TIBETAN = "Tibetan"
    MYANMAR = "Myanmar"
    GEORGIAN = "Georgian"
    HANGUL_JAMO = "Hangul Jamo"
    ETHIOPIC = "Ethiopic"
    ETHIOPIC_SUPPLEMENT = "Ethiopic Supplement"
    CHEROKEE = "Cherokee"
    UNIFIED_CANADIAN_ABORIGINAL_SYLLABICS = "Unified Canadian Aboriginal Syllabics"
    OGHAM = "Ogham"
    RUNIC = "Runic"
    TAGALOG = "Tagalog"
    HANUNOO = "Hanunoo"
    BUHID = "Buhid"
    TAGBANWA = "Tagbanwa"
    KHMER = "Khmer"
    MONGOLIAN = "Mongolian"
    UNIFIED_CANADIAN_ABORIGINAL_SYLLABICS_EXTENDED = "Unified Canadian Aboriginal Syllabics Extended"
    LIMBU = "Limbu"
    TAI_LE = "Tai Le"
    NEW_TAI_LUE = "New Tai Lue"
    KHMER_SYMBOLS = "Khmer Symbols"
    BUGINESE = "Buginese"
    TAI_THAM = "Tai Tham"
    BALINESE = "Balinese"
    SUNDANESE = "Sundanese"
    BATAK = "Batak"
    LEPCHA = "Lepcha"
    OL_CHIKI = "Ol Chiki"
    SUNDANESE_SUPPLEMENT = "Sundanese Supplement"
    VEDIC_EXTENSIONS = "Vedic Extensions"
    PHONETIC_EXTENSIONS = "Phonetic Extensions"
    PHONETIC_EXTENSIONS_SUPPLEMENT = "Phonetic Extensions Supplement"
    COMBINING_DIACRITICAL_MARKS_SUPPLEMENT = "Combining Diacritical Marks Supplement"
    LATIN_EXTENDED_ADDITIONAL = "Latin Extended Additional"
    GREEK_EXTENDED = "Greek Extended"
    GENERAL_PUNCTUATION = "General Punctuation"
    SUPERSCRIPTS_AND_SUBSCRIPTS = "Superscripts and Subscripts"
    CURRENCY_SYMBOLS = "Currency Symbols"
    COMBINING_DIACRITICAL_MARKS_FOR_SYMBOLS = "Combining Diacritical Marks for Symbols"
    LETTERLIKE_SYMBOLS = "Letterlike Symbols"
    NUMBER_FORMS = "Number Forms"
    ARROWS = "Arrows"
    MATHEMATICAL_OPERATORS = "Mathematical Operators"
    MISCELLANEOUS_TECHNICAL = "Miscellaneous Technical"
    CONTROL_PICTURES = "Control Pictures"
    OPTICAL_CHARACTER_RECOGNITION = "Optical Character Recognition"
    ENCLOSED_ALPHANUMERICS = "Enclosed Alphanumerics"
    BOX_DRAWING = "Box Drawing"
    BLOCK_ELEMENTS = "Block Elements"
    GEOMETRIC_SHAPES = "Geometric Shapes"
    MISCELLANEOUS_SYMBOLS = "Miscellaneous Symbols"
    DINGBATS = "Dingbats"
    MISCELLANEOUS_MATHEMATICAL_SYMBOLS_A = "Miscellaneous Mathematical Symbols-A"
    SUPPLEMENTAL_ARROWS_A = "Supplemental Arrows-A"
    BRAILLE_PATTERNS = "Braille Patterns"
    SUPPLEMENTAL_ARROWS_B = "Supplemental Arrows-B"
    MISCELLANEOUS_MATHEMATICAL_SYMBOLS_B = "Miscellaneous Mathematical Symbols-B"
    SUPPLEMENTAL_MATHEMATICAL_OPERATORS = "Supplemental Mathematical Operators"
    MISCELLANEOUS_SYMBOLS_AND_ARROWS = "Miscellaneous Symbols and Arrows"
    GLAGOLITIC = "Glagolitic"
    LATIN_EXTENDED_C = "Latin Extended-C"
    COPTIC = "Coptic"
    GEORGIAN_SUPPLEMENT = "Georgian Supplement"
    TIFINAGH = "Tifinagh"
    ETHIOPIC_EXTENDED = "Ethiopic Extended"
    CYRILLIC_EXTENDED_A = "Cyrillic Extended-A"
    SUPPLEMENTAL_PUNCTUATION = "Supplemental Punctuation"
    CJK_RADICALS_SUPPLEMENT = "CJK Radicals Supplement"
    KANGXI_RADICALS = "Kangxi Radicals"
    IDEOGRAPHIC_DESCRIPTION_CHARACTERS = "Ideographic Description Characters"
    CJK_SYMBOLS_AND_PUNCTUATION = "CJK Symbols and Punctuation"
    HIRAGANA = "Hiragana"
    KATAKANA = "Katakana"
    BOPOMOFO = "Bopomofo"
    HANGUL_COMPATIBILITY_JAMO = "Hangul Compatibility Jamo"
    KANBUN = "Kanbun"
    BOPOMOFO_EXTENDED = "Bopomofo Extended"
    CJK_STROKES = "CJK Strokes"
    KATAKANA_PHONETIC_EXTENSIONS = "Katakana Phonetic Extensions"
    ENCLOSED_CJK_LETTERS_AND_MONTHS = "Enclosed CJK Letters and Months"
    CJK_COMPATIBILITY = "CJK Compatibility"
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_A = "CJK Unified Ideographs Extension A"
    YIJING_HEXAGRAM_SYMBOLS = "Yijing Hexagram Symbols"
    CJK_UNIFIED_IDEOGRAPHS = "CJK Unified Ideographs"
    YI_SYLLABLES = "Yi Syllables"
    YI_RADICALS = "Yi Radicals"
    LISU = "Lisu"
    VAI = "Vai"
    CYRILLIC_EXTENDED_B = "Cyrillic Extended-B"
    BAMUM = "Bamum"
    MODIFIER_TONE_LETTERS = "Modifier Tone Letters"
    LATIN_EXTENDED_D = "Latin Extended-D"
    SYLOTI_NAGRI = "Syloti Nagri"
    COMMON_INDIC_NUMBER_FORMS = "Common Indic Number Forms"
    PHAGS_PA = "Phags-pa"
    SAURASHTRA = "Saurashtra"
    DEVANAGARI_EXTENDED = "Devanagari Extended"
    KAYAH_LI = "Kayah Li"
    REJANG = "Rejang"
    HANGUL_JAMO_EXTENDED_A = "Hangul Jamo Extended-A"
    JAVANESE = "Javanese"
    CHAM = "Cham"
    MYANMAR_EXTENDED_A = "Myanmar Extended-A"
    TAI_VIET = "Tai Viet"
    MEETEI_MAYEK_EXTENSIONS = "Meetei Mayek Extensions"
    ETHIOPIC_EXTENDED_A = "Ethiopic Extended-A"
    MEETEI_MAYEK = "Meetei Mayek"
    HANGUL_SYLLABLES = "Hangul Syllables"
    HANGUL_JAMO_EXTENDED_B = "Hangul Jamo Extended-B"
    HIGH_SURROGATES = "High Surrogates"
    HIGH_PRIVATE_USE_SURROGATES = "High Private Use Surrogates"
    LOW_SURROGATES = "Low Surrogates"
    PRIVATE_USE_AREA = "Private Use Area"
    CJK_COMPATIBILITY_IDEOGRAPHS = "CJK Compatibility Ideographs"
    ALPHABETIC_PRESENTATION_FORMS = "Alphabetic Presentation Forms"
    ARABIC_PRESENTATION_FORMS_A = "Arabic Presentation Forms-A"
    VARIATION_SELECTORS = "Variation Selectors"
    VERTICAL_FORMS = "Vertical Forms"
    COMBINING_HALF_MARKS = "Combining Half Marks"
    CJK_COMPATIBILITY_FORMS = "CJK Compatibility Forms"
    SMALL_FORM_VARIANTS = "Small Form Variants"
    ARABIC_PRESENTATION_FORMS_B = "Arabic Presentation Forms-B"
    HALFWIDTH_AND_FULLWIDTH_FORMS = "Halfwidth and Fullwidth Forms"
    SPECIALS = "Specials"
    LINEAR_B_SYLLABARY = "Linear B Syllabary"
    LINEAR_B_IDEOGRAMS = "Linear B Ideograms"
    AEGEAN_NUMBERS = "Aegean Numbers"
    ANCIENT_GREEK_NUMBERS = "Ancient Greek Numbers"
    ANCIENT_SYMBOLS = "Ancient Symbols"
    PHAISTOS_DISC = "Phaistos Disc"
    LYCIAN = "Lycian"
    CARIAN = "Carian"
    OLD_ITALIC = "Old Italic"
    GOTHIC = "Gothic"
    UGARITIC = "Ugaritic"
    OLD_PERSIAN = "Old Persian"
    DESERET = "Deseret"
    SHAVIAN = "Shavian"
    OSMANYA = "Osmanya"
    CYPRIOT_SYLLABARY = "Cypriot Syllabary"
    IMPERIAL_ARAMAIC = "Imperial Aramaic"
    PHOENICIAN = "Phoenician"
    LYDIAN = "Lydian"
    MEROITIC_HIEROGLYPHS = "Meroitic Hieroglyphs"
    MEROITIC_CURSIVE = "Meroitic Cursive"
    KHAROSHTHI = "Kharoshthi"
    OLD_SOUTH_ARABIAN = "Old South Arabian"
    AVESTAN = "Avestan"
    INSCRIPTIONAL_PARTHIAN = "Inscriptional Parthian"
    INSCRIPTIONAL_PAHLAVI = "Inscriptional Pahlavi"
    OLD_TURKIC = "Old Turkic"
    RUMI_NUMERAL_SYMBOLS = "Rumi Numeral Symbols"
    BRAHMI = "Brahmi"
    KAITHI = "Kaithi"
    SORA_SOMPENG = "Sora Sompeng"
    CHAKMA = "Chakma"
    SHARADA = "Sharada"
    TAKRI = "Takri"
    CUNEIFORM = "Cuneiform"
    CUNEIFORM_NUMBERS_AND_PUNCTUATION = "Cuneiform Numbers and Punctuation"
    EGYPTIAN_HIEROGLYPHS = "Egyptian Hieroglyphs"
    BAMUM_SUPPLEMENT = "Bamum Supplement"
    MIAO = "Miao"
    KANA_SUPPLEMENT = "Kana Supplement"
    BYZANTINE_MUSICAL_SYMBOLS = "Byzantine Musical Symbols"
    MUSICAL_SYMBOLS = "Musical Symbols"
    ANCIENT_GREEK_MUSICAL_NOTATION = "Ancient Greek Musical Notation"
    TAI_XUAN_JING_SYMBOLS = "Tai Xuan Jing Symbols"
    COUNTING_ROD_NUMERALS = "Counting Rod Numerals"
    MATHEMATICAL_ALPHANUMERIC_SYMBOLS = "Mathematical Alphanumeric Symbols"
    ARABIC_MATHEMATICAL_ALPHABETIC_SYMBOLS = "Arabic Mathematical Alphabetic Symbols"
    MAHJONG_TILES = "Mahjong Tiles"
    DOMINO_TILES = "Domino Tiles"
    PLAYING_CARDS = "Playing Cards"
    ENCLOSED_ALPHANUMERIC_SUPPLEMENT = "Enclosed Alphanumeric Supplement"
    ENCLOSED_IDEOGRAPHIC_SUPPLEMENT = "Enclosed Ideographic Supplement"
    MISCELLANEOUS_SYMBOLS_AND_PICTOGRAPHS = "Miscellaneous Symbols and Pictographs"
    EMOTICONS = "Emoticons"
    TRANSPORT_AND_MAP_SYMBOLS = "Transport and Map Symbols"
    ALCHEMICAL_SYMBOLS = "Alchemical Symbols"
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_B = "CJK Unified Ideographs Extension B"
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_C = "CJK Unified Ideographs Extension C"
    CJK_UNIFIED_IDEOGRAPHS_EXTENSION_D = "CJK Unified Ideographs Extension D"
    CJK_COMPATIBILITY_IDEOGRAPHS_SUPPLEMENT = "CJK Compatibility Ideographs Supplement"
    TAGS = "Tags"
    VARIATION_SELECTORS_SUPPLEMENT = "Variation Selectors Supplement"
    SUPPLEMENTARY_PRIVATE_USE_AREA_A = "Supplementary Private Use Area-A"
    SUPPLEMENTARY_PRIVATE_USE_AREA_B = "Supplementary Private Use Area-B"


class Script(RangeLabel):
    """Unicode scripts, in order of first appearance."""

    COMMON = "Common"
    LATIN = "Latin"
    BOPOMOFO = "Bopomofo"
    INHERITED = "Inherited"
    GREEK = "Greek"
    COPTIC = "Coptic"
    CYRILLIC = "Cyrillic"
    ARMENIAN = "Armenian"
    HEBREW = "Hebrew"
    ARABIC = "Arabic"
    SYRIAC = "Syriac"
    THAANA = "Thaana"
    NKO = "Nko"
    SAMARITAN = "Samaritan"
    MANDAIC = "Mandaic"
    DEVANAGARI = "Devanagari"
    BENGALI = "Bengali"
    GURMUKHI = "Gurmukhi"
    GUJARATI = "Gujarati"
    ORIYA = "Oriya"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    KANNADA = "Kannada"
    MALAYALAM = "Malayalam"
    SINHALA = "Sinhala"
    THAI = "Thai"
    LAO = "Lao"
    TIBETAN = "Tibetan"
    MYANMAR = "Myanmar"
    GEORGIAN = "Georgian"
    HANGUL = "Hangul"
    ETHIOPIC = "Ethiopic"
    CHEROKEE = "Cherokee"
    CANADIAN_ABORIGINAL = "Canadian_Aboriginal"
    OGHAM = "Ogham"
    RUNIC = "Runic"
    TAGALOG = "Tagalog"
    HANUNOO = "Hanunoo"
    BUHID = "Buhid"
    TAGBANWA = "Tagbanwa"
    KHMER = "Khmer"
    MONGOLIAN = "Mongolian"
    LIMBU = "Limbu"
    TAI_LE = "Tai_Le"
    NEW_TAI_LUE = "New_Tai_Lue"
    BUGINESE = "Buginese"
    TAI_THAM = "Tai_Tham"
    BALINESE = "Balinese"
    SUNDANESE = "Sundanese"
    BATAK = "Batak"
    LEPCHA = "Lepcha"
    OL_CHIKI = "Ol_Chiki"
    BRAILLE = "Braille"
    GLAGOLITIC = "Glagolitic"
    TIFINAGH = "Tifinagh"
    HAN = "Han"
    HIRAGANA = "Hiragana"
    KATAKANA = "Katakana"
    YI = "Yi"
    LISU = "Lisu"
    VAI = "Vai"
    BAMUM = "Bamum"
    SYLOTI_NAGRI = "Syloti_Nagri"
    PHAGS_PA = "Phags_Pa"
    SAURASHTRA = "Saurashtra"
    KAYAH_LI = "Kayah_Li"
    REJANG = "Rejang"
    JAVANESE = "Javanese"
    CHAM = "Cham"
    TAI_VIET = "Tai_Viet"
    MEETEI_MAYEK = "Meetei_Mayek"
    UNKNOWN = "Unknown"
    LINEAR_B = "Linear_B"
    LYCIAN = "Lycian"
    CARIAN = "Carian"
    OLD_ITALIC = "Old_Italic"
    GOTHIC = "Gothic"
    UGARITIC = "Ugaritic"
    OLD_PERSIAN = "Old_Persian"
    DESERET = "Deseret"
    SHAVIAN = "Shavian"
    OSMANYA = "Osmanya"
    CYPRIOT = "Cypriot"
    IMPERIAL_ARAMAIC = "Imperial_Aramaic"
    PHOENICIAN = "Phoenician"
    LYDIAN = "Lydian"
    MEROITIC_HIEROGLYPHS = "Meroitic_Hieroglyphs"
    MEROITIC_CURSIVE = "Meroitic_Cursive"
    KHAROSHTHI = "Kharoshthi"
    OLD_SOUTH_ARABIAN = "Old_South_Arabian"
    AVESTAN = "Avestan"
    INSCRIPTIONAL_PARTHIAN = "Inscriptional_Parthian"
    INSCRIPTIONAL_PAHLAVI = "Inscriptional_Pahlavi"
    OLD_TURKIC = "Old_Turkic"
    BRAHMI = "Brahmi"
    KAITHI = "Kaithi"
    SORA_SOMPENG = "Sora_Sompeng"
    CHAKMA = "Chakma"
    SHARADA = "Sharada"
    TAKRI = "Takri"
    CUNEIFORM = "Cuneiform"
    EGYPTIAN_HIEROGLYPHS = "Egyptian_Hieroglyphs"
    MIAO = "Miao"
