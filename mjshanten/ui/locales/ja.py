"""Japanese UI strings."""

TRANSLATIONS = {
    "label.title": "日本麻雀 向聴数計算機",
    "label.subtitle": "手牌を入力 (例: 123m456p789s11z[555z])、h でヘルプ、q で終了",
    "label.agari": "和了",
    "label.tenpai": "聴牌",
    "label.shanten": "{n}向聴",
    "label.shape": "和了形",
    "label.k": "必要面子数",
    "label.by_shape": "和了形別",
    "label.melds": "副露",
    "label.sets": "面子",
    "label.head": "雀頭",
    "label.partials": "搭子",
    "label.isolated": "浮き牌",
    "label.useful_tiles": "有効牌",
    "label.useful_total": "計{n}枚",
    "label.waits": "待ち",
    "label.history": "履歴",
    "label.none": "なし",
    "label.waits_exhausted": "なし（全て見えている）",

    "shape.standard": "面子手",
    "shape.seven_pairs": "七対子",
    "shape.thirteen_orphans": "国士無双",

    "tile.east": "東",
    "tile.south": "南",
    "tile.west": "西",
    "tile.north": "北",
    "tile.haku": "白",
    "tile.hatsu": "發",
    "tile.chun": "中",

    "error.title": "エラー",
    "error.MalformedHandSize": "手牌の枚数が不正です",
    "error.InvalidTileCount": "同じ牌が5枚以上あります",
    "error.InvalidMeldShape": "副露が成立していません",
    "error.InvalidNotation": "入力を解析できません",
    "error.InvalidCommand": "無効なコマンド",

    "help.text": (
        "手牌: 数字+種類 (m 萬子, p 筒子, s 索子, z 字牌)、[ ] は副露\n"
        "  例: 123m456p789s11z[555z]\n"
        "std / json  出力形式の切替\n"
        "lang zh|ja|en  言語の切替\n"
        "u  有効牌の表示切替\n"
        "log  履歴\n"
        "q  終了"
    ),
    "history.empty": "履歴はありません",

    "prompt.input": ">",
    "msg.setting": "設定を変更しました: {setting}",
    "msg.session_id": "セッションID: {id}",
    "msg.log_saved": "ログを保存しました: {path}",
    "msg.goodbye": "お疲れさまでした!",
}
