from ..classes.word import placeholder
from . import recognizers

DATE_RFC3164 = placeholder("date-rfc3164")
DATE_RFC5424 = placeholder("date-rfc5424")

# Only syntaxes that span several words and are detected reliably belong
# here, everything else is detected per word by the tokenizer.
LINE_SYNTAXES = [
    (recognizers.rfc3164_date, DATE_RFC3164),
    (recognizers.rfc5424_date, DATE_RFC5424),
]


def preprocess_line(line: str) -> str:
    """Replace multi-word dates in `line` by their placeholder."""
    out = []
    i = 0
    while i < len(line):
        for recognizer, name in LINE_SYNTAXES:
            consumed = recognizer(line, i)
            if consumed:
                out.append(name)
                i += consumed
                break
        else:
            out.append(line[i])
            i += 1
    return "".join(out)
