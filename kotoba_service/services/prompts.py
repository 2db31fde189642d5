"""
Prompt templates for the word-detail lookup.

The upstream model is asked to answer in Traditional Chinese (Taiwan usage)
and to return a bare JSON object; this service never parses that object.
"""

from typing import Optional

WORD_DETAIL_JSON_KEYS = (
    "originalWord",
    "chineseTranslation",
    "pos",
    "furigana",
    "romaji",
    "dictionaryForm",
    "explanation",
)

_WORD_DETAIL_TEMPLATE = """在日語句子「{sentence}」的上下文中，單字「{word}」(詞性: {pos}{reading}{romanization}) 的具體含義是什麼？請以繁體中文（台灣用語）回答，並以嚴格的 JSON 格式返回，內容中不要有 markdown 或其他非 JSON 字符。

請特別注意：
1. 若是動詞，請準確識別時態（過去式、現在式等）、語態（被動、使役等）和敬語程度（普通體、敬體等）
2. 助動詞與動詞組合（如「食べた」）請明確說明原形與活用過程
3. 形容詞請區分い形容詞與な形容詞，並識別活用形式
4. 請準確提供辭書形，若已是辭書形，請填相同值
5. 請使用自然、口語化的繁體中文，不使用簡體字，避免英文或其他語言

JSON 格式範例：
{{
  "originalWord": "{word}",
  "chineseTranslation": "這裡填繁體中文翻譯",
  "pos": "{pos}",
  "furigana": "{furigana}",
  "romaji": "{romaji}",
  "dictionaryForm": "這裡填辭書形（如果適用）",
  "explanation": "這裡填繁體中文解釋，包括詞形變化、時態、語態等詳細語法信息"
}}"""


def build_word_detail_prompt(
    word: str,
    pos: str,
    sentence: str,
    furigana: Optional[str] = None,
    romaji: Optional[str] = None,
) -> str:
    """Render the lookup instruction for ``word`` as used in ``sentence``."""
    furigana = furigana or ""
    romaji = romaji or ""
    return _WORD_DETAIL_TEMPLATE.format(
        sentence=sentence,
        word=word,
        pos=pos,
        reading=f", 讀音: {furigana}" if furigana else "",
        romanization=f", 羅馬音: {romaji}" if romaji else "",
        furigana=furigana,
        romaji=romaji,
    )
