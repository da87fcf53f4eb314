from infix_calculator.errors import CalculatorError
from infix_calculator.parser import format_postfix, to_postfix
from infix_calculator.runtime import evaluate
from infix_calculator.tokenizer import tokenize
from infix_calculator.utils import format_number

for code in [
    "5",
    "1+(2+3)",
    "5*9",
    "5 * 9",
    "65/4",
    "8-3-2",
    "2+3*4",
    "2+3^2",
    "15%8",
    "(4+6)*3",
    "1/0",
    "1+(5*9",
    "1+5)*9",
    "15*8/",
    "1.2.3+4",
    "",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
        print(f"tokens: {' '.join(str(t) for t in tokens)}")
        postfix = to_postfix(tokens)
        print(f"postfix: {format_postfix(postfix)}")
        result = evaluate(postfix)
    except CalculatorError as e:
        print(f"{e.kind}:\n{e}")
        continue
    print(f"result: {format_number(result)}")
