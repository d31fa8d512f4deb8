# art.py
"""ASCII art frames and color masks for every aquarium creature.

Art is stored as raw triple-quoted blocks and split into lines. In the
masks, letters are fixed colors (R G B Y M C W, either case) and digits
are color slots that get randomised per creature.
"""


def _art(text: str) -> list[str]:
    """Split a raw art block into lines, dropping the framing newlines."""
    return text.removeprefix("\n").removesuffix("\n").split("\n")


# ──────────────────────────────────────────────
#  Fish
# ──────────────────────────────────────────────

# species name -> (right art, right mask, left art, left mask)
FISH_ART = {
    "new_small_1": (
        _art(r"""
   \
  / \
>=_('>
  \_/
   /
"""),
        _art(r"""
   1
  1 1
663745
  111
   3
"""),
        _art(r"""
  /
 / \
<')_=<
 \_/
  \
"""),
        _art(r"""
  2
 111
547366
 111
  3
"""),
    ),
    "new_small_2": (
        _art(r"""
     ,
     }\
\  .'  `\
}}<   ( 6>
/  `,  .'
     }/
     '
"""),
        _art(r"""
     2
     22
6  11  11
661   7 45
6  11  11
     33
     3
"""),
        _art(r"""
    ,
   /{
 /'  `.  /
<6 )   >{{
 `.  ,'  \
   \{
    `
"""),
        _art(r"""
    2
   22
 11  11  6
54 7   166
 11  11  6
   33
    3
"""),
    ),
    "new_medium_1": (
        _art(r"""
            \'`.
             )  \
(`.??????_.-`' ' '`-.
 \ `.??.`        (o) \_
  >  ><     (((       (
 / .`??`._      /_|  /'
(.`???????`-. _  _.-`
            /__/'
"""),
        _art(r"""
            1111
             1  1
111      11111 1 1111
 1 11  11        141 11
  1  11     777       5
 1 11  111      333  11
111       111 1  1111
            11111
"""),
        _art(r"""
       .'`/
      /  (
  .-'` ` `'-._??????.')
_/ (o)        '.??.' /
)       )))     ><  <
`\  |_\      _.'??'. \
  '-._  _ .-'???????'.)
      `\__\
"""),
        _art(r"""
       1111
      1  1
  1111 1 11111      111
11 141        11  11 1
5       777     11  1
11  333      111  11 1
  1111  1 111       111
      11111
"""),
    ),
    "new_medium_2": (
        _art(r"""
       ,--,_
__    _\.---'-.
\ '.-"     // o\
/_.'-._    \\  /
       `"--(/"`
"""),
        _art(r"""
       22222
66    121111211
6 6111     77 41
6661111    77  1
       11113311
"""),
        _art(r"""
    _,--,
 .-'---./_    __
/o \\     "-.' /
\  //    _.-'._\
 `"\)--"`
"""),
        _art(r"""
    22222
 112111121    66
14 77     1116 6
1  77    1111666
 11331111
"""),
    ),
    "old_fancy": (
        _art(r"""
       \
     ...\..,
\  /'       \
 >=     (  ' >
/  \      / /
    `"'"'/'
"""),
        _art(r"""
       2
     1112111
6  11       1
 66     7  4 5
6  1      3 1
    1111131
"""),
        _art(r"""
      /
  ,../...
 /       '\  /
< '  )     =<
 \ \      /  \
  `'\'"'"'
"""),
        _art(r"""
      2
  1112111
 1       11  6
5 4  7     66
 1 3      1  6
  11311111
"""),
    ),
    "old_simple": (
        _art(r"""
    \
\ /--\
>=  (o>
/ \__/
    /
"""),
        _art(r"""
    2
6 1111
66  745
6 1111
    3
"""),
        _art(r"""
  /
 /--\ /
<o)  =<
 \__/ \
  \
"""),
        _art(r"""
  2
 1111 6
547  66
 1111 6
  3
"""),
    ),
    "old_wavy": (
        _art(r"""
       \:.
\;,   ,;\\\,,
  \\\;;:::::::o
  ///;;::::::::<
 /;` ``/////``
"""),
        _art(r"""
       222
666   1122211
  6661111111114
  66611111111115
 666 113333311
"""),
        _art(r"""
      .:/
   ,,///;,   ,;/
 o:::::::;;///
>::::::::;;\\\
  ''\\\\\'' ';\
"""),
        _art(r"""
      222
   1122211   666
 4111111111666
51111111111666
  113333311 666
"""),
    ),
    "old_tiny": (
        _art(r"""
  __
><_'>
   '
"""),
        _art(r"""
  11
61145
   3
"""),
        _art(r"""
 __
<'_><
 `
"""),
        _art(r"""
 11
54116
 3
"""),
    ),
    "old_comma_large": (
        _art(r"""
   ..\,
>='   ('>
  '''/'
"""),
        _art(r"""
   1121
661   745
  11131
"""),
        _art(r"""
  ,/..
<')   `=<
 ``\```
"""),
        _art(r"""
  1211
547   166
 113111
"""),
    ),
    "old_angled_fin": (
        _art(r"""
   \
  / \
>=_('>
  \_/
   /
"""),
        _art(r"""
   2
  1 1
661745
  111
   3
"""),
        _art(r"""
  /
 / \
<')_=<
 \_/
  \
"""),
        _art(r"""
  2
 1 1
547166
 111
  3
"""),
    ),
    "old_comma_small": (
        _art(r"""
  ,\
>=('>
  '/
"""),
        _art(r"""
  12
66745
  13
"""),
        _art(r"""
 /,
<')=<
 \`
"""),
        _art(r"""
 21
54766
 31
"""),
    ),
    "old_rounded": (
        _art(r"""
  __
\/ o\
/\__/
"""),
        _art(r"""
  11
61 41
61111
"""),
        _art(r"""
 __
/o \/
\__/\
"""),
        _art(r"""
 11
14 16
11116
"""),
    ),
}

# ──────────────────────────────────────────────
#  Bubbles, seaweed, water
# ──────────────────────────────────────────────

BUBBLE_FRAMES = [".", "o", "O", "O", "O"]

# Seaweed alternates these per row; the two sway frames swap them.
SEAWEED_LEFT = "("
SEAWEED_RIGHT = " )"

WATER_SEGMENTS = [
    "~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~",
    "^^^^ ^^^  ^^^   ^^^    ^^^^      ",
    "^^^^      ^^^^     ^^^    ^^     ",
    "^^      ^^^^      ^^^    ^^^^^^  ",
]


# ──────────────────────────────────────────────
#  Castle
# ──────────────────────────────────────────────

CASTLE_ART = _art(r"""
               T~~
               |
              /^\
             /   \
 _   _   _  /     \  _   _   _
[ ]_[ ]_[ ]/ _   _ \[ ]_[ ]_[ ]
|_=__-_ =_|_[ ]_[ ]_|_=-___-__|
 | _- =  | =_ = _    |= _=   |
 |= -[]  |- = _ =    |_-=_[] |
 | =_    |= - ___    | =_ =  |
 |=  []- |-  /| |\   |=_ =[] |
 |- =_   | =| | | |  |- = -  |
 |_______|__|_|_|_|__|_______|
""")

CASTLE_MASK = _art(r"""
                RR

              yyy
             y   y
            y     y
           y       y



              yyy
             yy yy
            y y y y
            yyyyyyy
""")


# ──────────────────────────────────────────────
#  Shark
# ──────────────────────────────────────────────

SHARK_RIGHT = _art(r"""

                              __
                             ( `\
  ,??????????????????????????)   `\
;' `.????????????????????????(     `\__
 ;   `.?????????????__..---''          `~~~~-._
  `.   `.____...--''                       (b  `--._
    >                     _.-'      .((      ._     )
  .`.-`--...__         .-'     -.___.....-(|/|/|/|/'
 ;.'?????????`. ...----`.___.',,,_______......---'
 '???????????'-'
""")

SHARK_RIGHT_MASK = _art(r"""






                                           cR

                                          cWWWWWWWW


""")

SHARK_LEFT = _art(r"""

                     __
                    /' )
                  /'   (??????????????????????????,
              __/'     )????????????????????????.' `;
      _.-~~~~'          ``---..__?????????????.'   ;
 _.--'  b)                       ``--...____.'   .'
(     _.      )).      `-._                     <
 `\|\|\|\|)-.....___.-     `-.         __...--'-.'.
   `---......_______,,,`.___.'----... .'?????????`.;
                                     `-`???????????`
""")

SHARK_LEFT_MASK = _art(r"""






        Rc

  WWWWWWWWc


""")

SHARK_TEETH = "*"


# ──────────────────────────────────────────────
#  Ship
# ──────────────────────────────────────────────

SHIP_RIGHT = _art(r"""

     |    |    |
    )_)  )_)  )_)
   )___))___))___)\
  )____)____)_____)\\
_____|____|____|____\\\__
\                   /
""")

SHIP_RIGHT_MASK = _art(r"""

     y    y    y

                  w
                   ww
yyyyyyyyyyyyyyyyyyyywwwyy
y                   y
""")

SHIP_LEFT = _art(r"""

         |    |    |
        (_(  (_(  (_(
      /(___((___((___(
    //(_____(____(____(
__///____|____|____|_____
    \                   /
""")

SHIP_LEFT_MASK = _art(r"""

         y    y    y

      w
    ww
yywwwyyyyyyyyyyyyyyyyyyyy
    y                   y
""")


# ──────────────────────────────────────────────
#  Whale
# ──────────────────────────────────────────────

WHALE_RIGHT = _art(r"""
        .-----:
      .'       `.
,????/       (o) \
\`._/          ,__)
""")

WHALE_RIGHT_MASK = _art(r"""
        BBBBBBB
      BB       BB
B    B       BWB B
BBBBB          BBBB
""")

WHALE_LEFT = _art(r"""
    :-----.
  .'       `.
 / (o)       \????,
(__,          \_.'/
""")

WHALE_LEFT_MASK = _art(r"""
    BBBBBBB
  BB       BB
 B BWB       B    B
BBBB          BBBBB
""")

# Seven spout frames, three rows each, drawn above the whale's head.
WATER_SPOUT = [
    ["", "", "   :"],
    ["", "   :", "   :"],
    ["  . .", "  -:-", "   :"],
    ["  . .", " .-:-.", "   :"],
    ["  . .", "'.-:-.`", "'  :  '"],
    ["", " .- -.", ";  :  ;"],
    ["", "", ";     ;"],
]


# ──────────────────────────────────────────────
#  Sea monster
# ──────────────────────────────────────────────

MONSTER_NEW_RIGHT = [
    _art(r"""

         _???_?????????????????????_???_???????_a_a
       _{.`=`.}_??????_???_??????_{.`=`.}_????{/ ''\_
 _????{.'  _  '.}????{.`'`.}????{.'  _  '.}??{|  ._oo)
{ \??{/  .'?'.  \}??{/ .-. \}??{/  .'?'.  \}?{/  |
"""),
    _art(r"""

                      _???_????????????????????_a_a
  _??????_???_??????_{.`=`.}_??????_???_??????{/ ''\_
 { \????{.`'`.}????{.'  _  '.}????{.`'`.}????{|  ._oo)
  \ \??{/ .-. \}??{/  .'?'.  \}??{/ .-. \}???{/  |
"""),
]

MONSTER_NEW_RIGHT_MASK = _art(r"""

                                                W W
""") + [""] * 3

MONSTER_NEW_LEFT = [
    _art(r"""

   a_a_???????_???_?????????????????????_???_
 _/'' \}????_{.`=`.}_??????_???_??????_{.`=`.}_
(oo_.  |}??{.'  _  '.}????{.`'`.}????{.'  _  '.}????_
    |  \}?{/  .'?'.  \}??{/ .-. \}??{/  .'?'.  \}??/ }
"""),
    _art(r"""

   a_a_????????????????????_   _
 _/'' \}??????_???_??????_{.`=`.}_??????_???_??????_
(oo_.  |}????{.`'`.}????{.'  _  '.}????{.`'`.}????/ }
    |  \}???{/ .-. \}??{/  .'?'.  \}??{/ .-. \}??/ /
"""),
]

MONSTER_NEW_LEFT_MASK = _art(r"""

   W W
""") + [""] * 3

MONSTER_OLD_RIGHT = [
    _art(r"""

                                                          ____
            __??????????????????????????????????????????/   o  \
          /    \????????_?????????????????????_???????/     ____ >
  _??????|  __  |?????/   \????????_????????/   \????|     |
 | \?????|  ||  |????|     |?????/   \?????|     |???|     |
"""),
    _art(r"""

                                                          ____
                                             __?????????/   o  \
             _?????????????????????_???????/    \?????/     ____ >
   _???????/   \????????_????????/   \????|  __  |???|     |
  | \?????|     |?????/   \?????|     |???|  ||  |???|     |
"""),
    _art(r"""

                                                          ____
                                  __????????????????????/   o  \
 _??????????????????????_???????/    \????????_???????/     ____ >
| \??????????_????????/   \????|  __  |?????/   \????|     |
 \ \???????/   \?????|     |???|  ||  |????|     |???|     |
"""),
    _art(r"""

                                                          ____
                       __???????????????????????????????/   o  \
  _??????????_???????/    \????????_??????????????????/     ____ >
 | \???????/   \????|  __  |?????/   \????????_??????|     |
  \ \?????|     |???|  ||  |????|     |?????/   \????|     |
"""),
]

MONSTER_OLD_RIGHT_MASK = _art(r"""


                                                            W
""") + [""] * 3

MONSTER_OLD_LEFT = [
    _art(r"""

    ____
  /  o   \??????????????????????????????????????????__
< ____     \???????_?????????????????????_????????/    \
      |     |????/   \????????_????????/   \?????|  __  |??????_
      |     |???|     |?????/   \?????|     |????|  ||  |?????/ |
"""),
    _art(r"""

    ____
  /  o   \?????????__
< ____     \?????/    \???????_?????????????????????_
      |     |???|  __  |????/   \????????_????????/   \???????_
      |     |???|  ||  |???|     |?????/   \?????|     |?????/ |
"""),
    _art(r"""

    ____
  /  o   \????????????????????__
< ____     \???????_????????/    \???????_??????????????????????_
      |     |????/   \?????|  __  |????/   \????????_??????????/ |
      |     |???|     |????|  ||  |???|     |?????/   \???????/ /
"""),
    _art(r"""

    ____
  /  o   \???????????????????????????????__
< ____     \??????????????????_????????/    \???????_??????????_
      |     |??????_????????/   \?????|  __  |????/   \???????/ |
      |     |????/   \?????|     |????|  ||  |???|     |?????/ /
"""),
]

MONSTER_OLD_LEFT_MASK = _art(r"""


     W
""") + [""] * 3


# ──────────────────────────────────────────────
#  Big fish
# ──────────────────────────────────────────────

BIG_FISH_1_RIGHT = _art(r"""
 ______
`""-.  `````-----.....__
     `.  .      .       `-.
       :     .     .       `.
 ,     :   .    .          _ :
: `.   :                  (@) `._
 `. `..'     .     =`-.       .__)
   ;     .        =  ~  :     .-"
 .' .'`.   .    .  =.-'  `._ .'
: .'   :               .   .'
 '   .'  .    .     .   .-'
   .'____....----''.'=.'
   ""             .'.'
               ''"'`
""")

BIG_FISH_1_RIGHT_MASK = _art(r"""
 111111
11111  11111111111111111
     11  2      2       111
       1     2     2       11
 1     1   2    2          1 1
1 11   1                  1W1 111
 11 1111     2     1111       1111
   1     2        1  1  1     111
 11 1111   2    2  1111  111 11
1 11   1               2   11
 1   11  2    2     2   111
   111111111111111111111
   11             1111
               11111
""")

BIG_FISH_1_LEFT = _art(r"""
                           ______
          __.....-----'''''  .-""'
       .-'       .      .  .'
     .'       .     .     :
    : _          .    .   :     ,
 _.' (@)                  :   .' :
(__.       .-'=     .     `..' .'
 "-.     :  ~  =        .     ;
   `. _.'  `-.=  .    .   .'`. `.
     `.   .               :   `. :
       `-.   .     .    .  `.   '
          `.=`.``----....____`.
            `.`.             ""
              '`"``
""")

BIG_FISH_1_LEFT_MASK = _art(r"""
                           111111
          11111111111111111  11111
       111       2      2  11
     11       2     2     1
    1 1          2    2   1     1
 111 1W1                  1   11 1
1111       1111     2     1111 11
 111     1  1  1        2     1
   11 111  1111  2    2   1111 11
     11   2               1   11 1
       111   2     2    2  11   1
          111111111111111111111
            1111             11
              11111
""")

BIG_FISH_2_RIGHT = _art(r"""
                _ _ _
             .='\ \ \`"=,
           .'\ \ \ \ \ \ \
\'=._     / \ \ \_\_\_\_\_\
\'=._'.  /\ \,-"`- _ - _ - '-.
  \`=._\|'.\/- _ - _ - _ - _- \
  ;"= ._\=./_ -_ -_ {`"=_    @ \
   ;="_-_=- _ -  _ - {"=_"-     \
   ;_=_--_.,          {_.='   .-/
  ;.="` / ';\        _.     _.-`
  /_.='/ \/ /;._ _ _{.-;`/"`
/._=_.'   '/ / / / /{.= /
/.='       `'./_/_.=`{_/
""")

BIG_FISH_2_RIGHT_MASK = _art(r"""
                1 1 1
             1111 1 11111
           111 1 1 1 1 1 1
11111     1 1 1 11111111111
1111111  11 111112 2 2 2 2 111
  111111111112 2 2 2 2 2 2 22 1
  111 1111 12 22 22 11111    W 1
   11111112 2 2  2 2 111111     1
   111111111          11111   111
  11111 11111        11     1111
  111111 11 1111 1 111111111
1111111   11 1 1 1 1111 1
1111       1111111111111
""")

BIG_FISH_2_LEFT = _art(r"""
            _ _ _
        ,="`/ / /'=.
       / / / / / / /'.
      /_/_/_/_/_/ / / \     _.='/
   .-' - _ - _ -`"-,/ /\  .'_.='/
  / -_ - _ - _ - _ -\/.'|/_.=`/
 / @    _="`} _- _- _\.=/_. =";
/     -"_="} - _  - _ -=_-_"=;
\-.   '=._}          ,._--_=_;
 `-._     ._        /;' \ `"=.;
     `"\`;-.}_ _ _.;\ \/ \'=._\
        \ =.}\ \ \ \ \'   '._=_.\
         \_}`=._\_\.'`       '=.\
""")

BIG_FISH_2_LEFT_MASK = _art(r"""
            1 1 1
        11111 1 1111
       1 1 1 1 1 1 111
      11111111111 1 1 1     11111
   111 2 2 2 2 211111 11  1111111
  1 22 2 2 2 2 2 2 211111111111
 1 W    11111 22 22 2111111 111
1     111111 2 2  2 2 21111111
111   11111          111111111
 1111     11        111 1 11111
     111111111 1 1111 11 111111
        1 1111 1 1 1 11   1111111
         1111111111111       1111
""")
