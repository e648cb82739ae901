"""
例外定義
"""


class CommSkillsError(Exception):
    """commskillsパッケージの例外の基底クラス"""

    pass


class InvalidArgumentError(CommSkillsError, ValueError):
    """
    引数の型が契約に反する場合に送出される例外

    空文字列や0秒の録音時間のような、型は正しいが値が退化している入力では送出しない
    """

    pass
