EPSILON = 0.0001
DISPLAY_PLACES = 2

CREDITOR = "creditor"
DEBTOR = "debtor"
SETTLED = "settled"


def classify(balance: float, epsilon: float = EPSILON) -> str:
    if balance > epsilon:
        return CREDITOR
    if balance < -epsilon:
        return DEBTOR
    return SETTLED


def is_settled(balance: float, epsilon: float = EPSILON) -> bool:
    return abs(balance) <= epsilon


def round_display(amount: float, places: int = DISPLAY_PLACES) -> float:
    # emitted amounts only; running totals stay unrounded
    return round(amount, places)
