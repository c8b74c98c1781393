"""
OCR text samples shared by the tests.
"""

RIPPLE_JUNCTION_TEXT = """RIPPLE JUNCTION
PO 123456 REVISION 0
ZQBQ99A 001 BLACK S GODZILLA CLASSIC KING OF MINI 12 12.50 150.00
ZQBQ99A 001 BLACK M GODZILLA CLASSIC KING OF MINI 24 12.50 300.00
ABC123 001 BLACK L GODZILLA CLASSIC KING OF MINI 6 12.50 75.00
ZQBQ99A 001 BLACK XL GODZILLA CLASSIC KING OF MINI 100 12.50 1,250.00
"""

FA_WORLD_TEXT = """FA World Entertainment
PO #: 88412
Pile Fleece Overshirt
Black - Black
Xs 12 $18.50 S 24 M 24 L 12
Qty 72 Total $1,332.00
Corduroy Lounge Pants - Fall 25
Brown - Brown
S 10 M 20 L 10
Qty 40 Total $900.00
"""

VIOLENT_GENTLEMEN_TEXT = """Violent Gentlemen
Purchase Order# VG-10442
Style Name Style # Color Fabric XS S M L XL 2X Qty Price Total
Shredder Tee VGSS24-001 Black Cotton 2 4 6 4 2 18 $12.00 $216.00
Roadkill Hoodie VGFW24-117 Heather Fleece 0 6 12 12 6 0 36 $28.50 $1,026.00 8 $31.00 $248.00
"""

BAKER_BOYS_TEXT = """Baker Boys Distribution
P.O. Number: 55120
Item Unit Ordered Shipped B/O Price Amount Description
10-2045 EACH 24 24 0 8.50 204.00 BAKER SKATE DECK 8.0 Whse: 01 Bin A4
10-3310 EACH 120 120 0 11.25 1,350.00 SHAKE JUNT GRIPTAPE
"""

GENERIC_TEXT = """ACME SUPPLY CO
Customer: Steadfast Wholesale
PO #: 77812
AB-100 Widget 5 $2.00 $10.00
Blue anodized widget
CD-200 Gadget 3 $4.50 $13.50
EF-300 Gizmo 2 $1,000.00 $2,000.00
"""
