"""English UI strings."""

TRANSLATIONS = {
    "label.title": "Riichi Mahjong Shanten Calculator",
    "label.subtitle": "Enter a hand (e.g. 123m456p789s11z[555z]), h for help, q to quit",
    "label.agari": "Complete",
    "label.tenpai": "Tenpai",
    "label.shanten": "{n}-shanten",
    "label.shape": "Shape",
    "label.k": "Sets needed",
    "label.by_shape": "By shape",
    "label.melds": "Melds",
    "label.sets": "Sets",
    "label.head": "Pair",
    "label.partials": "Partial sets",
    "label.isolated": "Isolated",
    "label.useful_tiles": "Useful tiles",
    "label.useful_total": "{n} tiles",
    "label.waits": "Waits",
    "label.history": "History",
    "label.none": "none",
    "label.waits_exhausted": "none left, every copy is visible",

    "shape.standard": "Standard",
    "shape.seven_pairs": "Seven Pairs",
    "shape.thirteen_orphans": "Thirteen Orphans",

    "tile.east": "E",
    "tile.south": "S",
    "tile.west": "W",
    "tile.north": "N",
    "tile.haku": "Wh",
    "tile.hatsu": "G",
    "tile.chun": "R",

    "error.title": "Error",
    "error.MalformedHandSize": "Wrong number of tiles",
    "error.InvalidTileCount": "More than 4 copies of a tile",
    "error.InvalidMeldShape": "Invalid meld",
    "error.InvalidNotation": "Could not parse input",
    "error.InvalidCommand": "Invalid command",

    "help.text": (
        "Hand: digits + suit (m man, p pin, s sou, z honor), [ ] for melds\n"
        "  e.g. 123m456p789s11z[555z]\n"
        "std / json  switch output format\n"
        "lang zh|ja|en  switch language\n"
        "u  toggle useful tiles\n"
        "log  history\n"
        "q  quit"
    ),
    "history.empty": "No history yet",

    "prompt.input": ">",
    "msg.setting": "Setting updated: {setting}",
    "msg.session_id": "Session ID: {id}",
    "msg.log_saved": "Log saved: {path}",
    "msg.goodbye": "Goodbye!",
}
