"""Simplified Chinese UI strings."""

TRANSLATIONS = {
    "label.title": "日本麻将向听数计算器",
    "label.subtitle": "输入手牌 (例: 123m456p789s11z[555z]), h 查看帮助, q 退出",
    "label.agari": "和了",
    "label.tenpai": "听牌",
    "label.shanten": "{n}向听",
    "label.shape": "和了形",
    "label.k": "所需面子数",
    "label.by_shape": "各和了形",
    "label.melds": "副露",
    "label.sets": "面子",
    "label.head": "雀头",
    "label.partials": "搭子",
    "label.isolated": "浮牌",
    "label.useful_tiles": "有效牌",
    "label.useful_total": "共{n}枚",
    "label.waits": "听牌",
    "label.history": "历史记录",
    "label.none": "无",
    "label.waits_exhausted": "无（已全部可见）",

    "shape.standard": "面子手",
    "shape.seven_pairs": "七对子",
    "shape.thirteen_orphans": "国士无双",

    "tile.east": "东",
    "tile.south": "南",
    "tile.west": "西",
    "tile.north": "北",
    "tile.haku": "白",
    "tile.hatsu": "发",
    "tile.chun": "中",

    "error.title": "错误",
    "error.MalformedHandSize": "手牌数量错误",
    "error.InvalidTileCount": "同种牌超过4枚",
    "error.InvalidMeldShape": "副露不成立",
    "error.InvalidNotation": "无法解析输入",
    "error.InvalidCommand": "无效命令",

    "help.text": (
        "手牌: 数字+花色 (m 万, p 筒, s 索, z 字), [ ] 内为副露\n"
        "  例: 123m456p789s11z[555z]\n"
        "std / json  切换输出格式\n"
        "lang zh|ja|en  切换语言\n"
        "u  显示/隐藏有效牌\n"
        "log  历史记录\n"
        "q  退出"
    ),
    "history.empty": "暂无记录",

    "prompt.input": ">",
    "msg.setting": "设置已更新: {setting}",
    "msg.session_id": "会话ID: {id}",
    "msg.log_saved": "记录已保存: {path}",
    "msg.goodbye": "再见!",
}
