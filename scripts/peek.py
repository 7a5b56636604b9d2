from vcardcodec.item import Item
from vcardcodec.models import CardContext

SAMPLES = [
    ("N", "Dör;Jöhn;;;"),
    ("FN", "Jöhn Dör"),
    ("TEL", "(555) 010-2000"),
    ("ORG", "Åcme;Sälës"),
    ("NOTE", "First line\r\nSecond line, which is long enough to need folding at some point"),
]

for version in ("2.1", "3.0"):
    context = CardContext(version=version, charset="iso-8859-1")
    print(f"VERSION:{version}")
    for name, value in SAMPLES:
        item = Item(name)
        item.set_decoded_value(value, context)
        print(item.to_item_string())
        print('Decoded:', repr(item.decoded_value))
