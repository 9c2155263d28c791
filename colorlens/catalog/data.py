"""Standard HTML/CSS named colors.

Rows are ``(name, hex, web_safe, basic, extended, legacy)`` in alphabetical
order. ``legacy`` is ``(index, name, alias)`` for the colors that correspond
to an entry of the 16-color CGA palette, otherwise ``None``; ``alias`` is
``None`` when the palette entry has no alternate name.
"""

NAMED_COLOR_ROWS = (
    ("AliceBlue", "#F0F8FF", False, False, True, None),
    ("AntiqueWhite", "#FAEBD7", False, False, True, None),
    ("Aqua", "#00FFFF", True, True, True, ("11", "Cyan", "Aqua")),
    ("Aquamarine", "#7FFFD4", False, False, True, None),
    ("Azure", "#F0FFFF", False, False, True, None),
    ("Beige", "#F5F5DC", False, False, True, None),
    ("Bisque", "#FFE4C4", False, False, True, None),
    ("Black", "#000000", True, True, True, ("0", "Black", None)),
    ("BlanchedAlmond", "#FFEBCD", False, False, True, None),
    ("Blue", "#0000FF", True, True, True, ("9", "Blue", None)),
    ("BlueViolet", "#8A2BE2", False, False, True, None),
    ("Brown", "#A52A2A", False, False, True, None),
    ("BurlyWood", "#DEB887", False, False, True, None),
    ("CadetBlue", "#5F9EA0", False, False, True, None),
    ("Chartreuse", "#7FFF00", False, False, True, None),
    ("Chocolate", "#D2691E", False, False, True, None),
    ("Coral", "#FF7F50", False, False, True, None),
    ("CornflowerBlue", "#6495ED", False, False, True, None),
    ("Cornsilk", "#FFF8DC", False, False, True, None),
    ("Crimson", "#DC143C", False, False, True, None),
    ("Cyan", "#00FFFF", True, True, True, ("11", "Cyan", "Aqua")),
    ("DarkBlue", "#00008B", False, False, True, None),
    ("DarkCyan", "#008B8B", False, False, True, None),
    ("DarkGoldenRod", "#B8860B", False, False, True, None),
    ("DarkGray", "#A9A9A9", False, False, True, None),
    ("DarkGreen", "#006400", False, False, True, None),
    ("DarkKhaki", "#BDB76B", False, False, True, None),
    ("DarkMagenta", "#8B008B", False, False, True, None),
    ("DarkOliveGreen", "#556B2F", False, False, True, None),
    ("DarkOrange", "#FF8C00", False, False, True, None),
    ("DarkOrchid", "#9932CC", False, False, True, None),
    ("DarkRed", "#8B0000", False, False, True, None),
    ("DarkSalmon", "#E9967A", False, False, True, None),
    ("DarkSeaGreen", "#8FBC8F", False, False, True, None),
    ("DarkSlateBlue", "#483D8B", False, False, True, None),
    ("DarkSlateGray", "#2F4F4F", False, False, True, None),
    ("DarkTurquoise", "#00CED1", False, False, True, None),
    ("DarkViolet", "#9400D3", False, False, True, None),
    ("DeepPink", "#FF1493", False, False, True, None),
    ("DeepSkyBlue", "#00BFFF", False, False, True, None),
    ("DimGray", "#696969", False, False, True, None),
    ("DodgerBlue", "#1E90FF", False, False, True, None),
    ("FireBrick", "#B22222", False, False, True, None),
    ("FloralWhite", "#FFFAF0", False, False, True, None),
    ("ForestGreen", "#228B22", False, False, True, None),
    ("Fuchsia", "#FF00FF", True, True, True, ("13", "Magenta", "Fuchsia")),
    ("Gainsboro", "#DCDCDC", False, False, True, None),
    ("GhostWhite", "#F8F8FF", False, False, True, None),
    ("Gold", "#FFD700", False, False, True, None),
    ("GoldenRod", "#DAA520", False, False, True, None),
    ("Gray", "#808080", True, True, True, ("7", "LightGray", "Gray")),
    ("Green", "#008000", True, True, True, ("2", "Green", None)),
    ("GreenYellow", "#ADFF2F", False, False, True, None),
    ("HoneyDew", "#F0FFF0", False, False, True, None),
    ("HotPink", "#FF69B4", False, False, True, None),
    ("IndianRed", "#CD5C5C", False, False, True, None),
    ("Indigo", "#4B0082", False, False, True, None),
    ("Ivory", "#FFFFF0", False, False, True, None),
    ("Khaki", "#F0E68C", False, False, True, None),
    ("Lavender", "#E6E6FA", False, False, True, None),
    ("LavenderBlush", "#FFF0F5", False, False, True, None),
    ("LawnGreen", "#7CFC00", False, False, True, None),
    ("LemonChiffon", "#FFFACD", False, False, True, None),
    ("LightBlue", "#ADD8E6", False, False, True, None),
    ("LightCoral", "#F08080", False, False, True, None),
    ("LightCyan", "#E0FFFF", False, False, True, None),
    ("LightGoldenRodYellow", "#FAFAD2", False, False, True, None),
    ("LightGray", "#D3D3D3", False, False, True, None),
    ("LightGreen", "#90EE90", False, False, True, None),
    ("LightPink", "#FFB6C1", False, False, True, None),
    ("LightSalmon", "#FFA07A", False, False, True, None),
    ("LightSeaGreen", "#20B2AA", False, False, True, None),
    ("LightSkyBlue", "#87CEFA", False, False, True, None),
    ("LightSlateGray", "#778899", False, False, True, None),
    ("LightSteelBlue", "#B0C4DE", False, False, True, None),
    ("LightYellow", "#FFFFE0", False, False, True, None),
    ("Lime", "#00FF00", True, True, True, ("10", "Lime", None)),
    ("LimeGreen", "#32CD32", False, False, True, None),
    ("Linen", "#FAF0E6", False, False, True, None),
    ("Magenta", "#FF00FF", True, True, True, ("13", "Magenta", "Fuchsia")),
    ("Maroon", "#800000", True, True, True, ("1", "Maroon", None)),
    ("MediumAquaMarine", "#66CDAA", False, False, True, None),
    ("MediumBlue", "#0000CD", False, False, True, None),
    ("MediumOrchid", "#BA55D3", False, False, True, None),
    ("MediumPurple", "#9370DB", False, False, True, None),
    ("MediumSeaGreen", "#3CB371", False, False, True, None),
    ("MediumSlateBlue", "#7B68EE", False, False, True, None),
    ("MediumSpringGreen", "#00FA9A", False, False, True, None),
    ("MediumTurquoise", "#48D1CC", False, False, True, None),
    ("MediumVioletRed", "#C71585", False, False, True, None),
    ("MidnightBlue", "#191970", False, False, True, None),
    ("MintCream", "#F5FFFA", False, False, True, None),
    ("MistyRose", "#FFE4E1", False, False, True, None),
    ("Moccasin", "#FFE4B5", False, False, True, None),
    ("NavajoWhite", "#FFDEAD", False, False, True, None),
    ("Navy", "#000080", True, True, True, ("1", "Navy", None)),
    ("OldLace", "#FDF5E6", False, False, True, None),
    ("Olive", "#808000", True, True, True, ("6", "Olive", None)),
    ("OliveDrab", "#6B8E23", False, False, True, None),
    ("Orange", "#FFA500", False, False, True, None),
    ("OrangeRed", "#FF4500", False, False, True, None),
    ("Orchid", "#DA70D6", False, False, True, None),
    ("PaleGoldenRod", "#EEE8AA", False, False, True, None),
    ("PaleGreen", "#98FB98", False, False, True, None),
    ("PaleTurquoise", "#AFEEEE", False, False, True, None),
    ("PaleVioletRed", "#DB7093", False, False, True, None),
    ("PapayaWhip", "#FFEFD5", False, False, True, None),
    ("PeachPuff", "#FFDAB9", False, False, True, None),
    ("Peru", "#CD853F", False, False, True, None),
    ("Pink", "#FFC0CB", False, False, True, None),
    ("Plum", "#DDA0DD", False, False, True, None),
    ("PowderBlue", "#B0E0E6", False, False, True, None),
    ("Purple", "#800080", True, True, True, ("5", "Purple", None)),
    ("Red", "#FF0000", True, True, True, ("12", "Red", None)),
    ("RosyBrown", "#BC8F8F", False, False, True, None),
    ("RoyalBlue", "#4169E1", False, False, True, None),
    ("SaddleBrown", "#8B4513", False, False, True, None),
    ("Salmon", "#FA8072", False, False, True, None),
    ("SandyBrown", "#F4A460", False, False, True, None),
    ("SeaGreen", "#2E8B57", False, False, True, None),
    ("SeaShell", "#FFF5EE", False, False, True, None),
    ("Sienna", "#A0522D", False, False, True, None),
    ("Silver", "#C0C0C0", True, True, True, ("15", "Silver", None)),
    ("SkyBlue", "#87CEEB", False, False, True, None),
    ("SlateBlue", "#6A5ACD", False, False, True, None),
    ("SlateGray", "#708090", False, False, True, None),
    ("Snow", "#FFFAFA", False, False, True, None),
    ("SpringGreen", "#00FF7F", False, False, True, None),
    ("SteelBlue", "#4682B4", False, False, True, None),
    ("Tan", "#D2B48C", False, False, True, None),
    ("Teal", "#008080", True, True, True, ("3", "Teal", None)),
    ("Thistle", "#D8BFD8", False, False, True, None),
    ("Tomato", "#FF6347", False, False, True, None),
    ("Turquoise", "#40E0D0", False, False, True, None),
    ("Violet", "#EE82EE", False, False, True, None),
    ("Wheat", "#F5DEB3", False, False, True, None),
    ("White", "#FFFFFF", True, True, True, ("15", "White", None)),
    ("WhiteSmoke", "#F5F5F5", False, False, True, None),
    ("Yellow", "#FFFF00", True, True, True, ("14", "Yellow", None)),
    ("YellowGreen", "#9ACD32", False, False, True, None),
)
