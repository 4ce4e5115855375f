"""
Prompt construction for the debt repayment coach.

Both builders are pure: the same debts, amounts, message and date always give
byte-identical text. Every fixed piece of wording lives in a module constant so
callers and tests can look for it without rebuilding the whole document.
"""

from datetime import date
from typing import List, Sequence
from debt_coach.domain.models import Debt, Strategy

DEFAULT_CURRENCY = "Rs."
DATE_FORMAT = "%Y-%m-%d"

# Returned by chat, without calling the coach, when there is nothing to plan yet
EMPTY_STORE_GUIDANCE = (
    "It looks like you haven't added any debts yet. "
    "Please add your debts first so I can help you plan!"
)

PERSONA_PREAMBLE = (
    "Act as a friendly, encouraging, and helpful AI Debt Management Coach. "
    "Your primary goal is to help the user understand and plan their debt repayment "
    "using ONLY two strategies: the Snowball method (pay off the lowest balance first) "
    "and the Avalanche method (pay off the highest APR first), based ONLY on the "
    "information provided."
)

DATE_LINE = "Current Date: {date}"
DEBTS_HEADER = "User's Debts:"
DEBT_LINE = (
    "- Name: {name}, Current Balance: {cur}{balance:.2f}, APR: {apr:.2f}%, "
    "Minimum Payment: {cur}{min_payment:.2f}"
)
NO_DEBTS_LINE = "User has no debts listed currently."
EXTRA_PAYMENT_LINE = "User's potential extra monthly payment towards debt: {cur}{amount:.2f}"
NO_EXTRA_PAYMENT_LINE = "User has not specified an extra monthly payment amount."
USER_MESSAGE_LINE = 'User\'s latest message: "{message}"'

CAPABILITIES_INTRO = (
    "Based on the user's message and their debt situation (and extra payment amount "
    "if provided), please respond helpfully. Here are your capabilities:"
)

EXPLAIN_CAPABILITY = {
    True: (
        "1.  **Explain Strategies:** If the user asks about the Snowball or Avalanche method "
        '(e.g., "explain snowball", "what is avalanche?"), explain it clearly and simply '
        "(1-2 sentences), then give a short worked example using their debts: identify which "
        "specific debt would be targeted first according to that method and why."
    ),
    False: (
        "1.  **Explain Strategies:** If the user asks about the Snowball or Avalanche method "
        '(e.g., "explain snowball", "what is avalanche?"), explain it clearly and simply '
        "(1-2 sentences) with a short generic example, since no debts have been added yet."
    ),
}

RECOMMEND_CAPABILITY = {
    True: (
        "2.  **Recommend Strategy:** If the user asks for a recommendation "
        '(e.g., "which method is best?", "snowball or avalanche for me?"), analyze their debts. Generally:\n'
        "    * Suggest Avalanche if minimizing total interest paid is the priority, naming the "
        "highest APR debt.\n"
        "    * Suggest Snowball if quick wins and motivation are desired, naming the lowest "
        "balance debt.\n"
        "    * Acknowledge both are valid and the 'best' depends on personal preference and "
        "behavior. Base the recommendation *only* on the provided debt list."
    ),
    False: (
        "2.  **Recommend Strategy:** If the user asks for a recommendation "
        '(e.g., "which method is best?", "snowball or avalanche for me?"), explain the decision '
        "rule in general terms:\n"
        "    * Avalanche suits someone who wants to minimize total interest paid "
        "(it targets the highest APR debt).\n"
        "    * Snowball suits someone who wants quick wins and motivation "
        "(it targets the lowest balance debt).\n"
        "    * Acknowledge both are valid and suggest adding debts for a specific recommendation."
    ),
}

ESTIMATE_CAPABILITY = (
    "3.  **Estimate Payoff (only if an extra payment is provided AND requested):** If the user "
    "has an 'extra monthly payment' amount AND asks about a timeline or the impact of the extra "
    'payment (e.g., "how long to pay off?", "what difference does {cur}{amount} make?"):\n'
    "    * Briefly compare, qualitatively or with rough numbers, how focusing the extra payment "
    "with *both* the Snowball and Avalanche methods might affect the payoff timeline compared "
    "to minimum payments only.\n"
    "    * **Crucially:** Label these as *very rough estimates* based on current data and the "
    "specified extra payment. Do *not* perform month-by-month amortization."
)

GENERAL_CHAT_CAPABILITY = (
    '4.  **General Chat:** Respond appropriately to greetings ("Hi", "Hello"), simple questions '
    'about the tool ("How does this work?"), or other relevant conversational messages within '
    "your role as a debt coach."
)

CLARIFICATION_CAPABILITY = (
    "5.  **Clarification:** If the user's message is unclear or doesn't fit the above, ask for "
    'clarification politely (e.g., "Could you please tell me more about what you\'d like to know?").'
)

NO_DEBTS_NOTE = (
    "Note: no debts are listed, so tailor explanations and recommendations to general concepts "
    "rather than specific (non-existent) debts. You can still explain how the methods *would* "
    "work if debts were present."
)

CONSTRAINTS_HEADER = "**IMPORTANT CONSTRAINTS:**"
CONSTRAINTS = (
    '* **DO NOT** give specific financial advice (e.g., "You SHOULD take out a loan") or '
    "recommend specific financial products (loans, credit cards, banks).",
    "* **ONLY IF** the user *explicitly* asks \"What is debt consolidation?\", you may briefly "
    "explain the concept, keeping it neutral, general, and stating it's just information.",
    "* **STICK TO** the provided debts and the Snowball and Avalanche methods.",
    '* **MAINTAIN** an encouraging, supportive, and friendly tone. Use "You" and "Your".',
    "* **KEEP** responses concise and easy to understand. Use paragraphs or bullet points if needed.",
    "* **USE** the currency symbol '{cur}' when referring to debt amounts or payments.",
)

EXPLAIN_PREAMBLE = (
    "Act as a friendly AI Debt Management Coach. Explain the '{strategy}' debt repayment "
    "strategy ({rule}) in simple terms (1-2 sentences). Based *only* on the following debts, "
    "identify which specific debt the user should focus on paying off first using this method "
    "and briefly state why. Keep the entire explanation concise (around 3-4 sentences total) "
    "and encouraging. Do *not* give other advice."
)
EXPLAIN_DEBT_LINE = (
    "- Name: {name}, Balance: {cur}{balance:.2f}, APR: {apr:.2f}%, Min Pay: {cur}{min_payment:.2f}"
)

STRATEGY_RULES = {
    Strategy.SNOWBALL: "pay off the lowest balance first",
    Strategy.AVALANCHE: "pay off the highest APR first",
}


def format_debt_lines(debts: Sequence[Debt], template: str = DEBT_LINE, currency: str = DEFAULT_CURRENCY) -> List[str]:
    """One line per debt, amounts to 2 decimal places"""
    return [
        template.format(
            name=d.name,
            balance=d.balance,
            apr=d.apr,
            min_payment=d.min_payment,
            cur=currency,
        )
        for d in debts
    ]


def build_strategy_prompt(
    debts: Sequence[Debt],
    extra_payment: float | None,
    user_message: str,
    current_date: date,
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """
    Compose the chat instruction document.

    Sections, in order: persona, date, debts (or a no-debts statement), extra
    payment (or a none-specified statement), the verbatim user message, then
    the capabilities and constraints blocks. With no debts the capabilities are
    still emitted, worded generically.
    """
    has_debts = len(debts) > 0
    has_extra = extra_payment is not None and extra_payment >= 0

    sections = [
        PERSONA_PREAMBLE,
        DATE_LINE.format(date=current_date.strftime(DATE_FORMAT)),
    ]

    if has_debts:
        sections.append("\n".join([DEBTS_HEADER, *format_debt_lines(debts, currency=currency)]))
    else:
        sections.append(NO_DEBTS_LINE)

    if has_extra:
        sections.append(EXTRA_PAYMENT_LINE.format(cur=currency, amount=extra_payment))
    else:
        sections.append(NO_EXTRA_PAYMENT_LINE)

    sections.append(USER_MESSAGE_LINE.format(message=user_message))

    estimate_amount = f"{extra_payment:.2f}" if has_extra else "XXX"
    capabilities = [
        CAPABILITIES_INTRO,
        "",
        EXPLAIN_CAPABILITY[has_debts],
        RECOMMEND_CAPABILITY[has_debts],
        ESTIMATE_CAPABILITY.format(cur=currency, amount=estimate_amount),
        GENERAL_CHAT_CAPABILITY,
        CLARIFICATION_CAPABILITY,
    ]
    if not has_debts:
        capabilities.append(NO_DEBTS_NOTE)
    sections.append("\n".join(capabilities))

    constraints = [CONSTRAINTS_HEADER, *(c.format(cur=currency) for c in CONSTRAINTS)]
    sections.append("\n".join(constraints))

    return "\n\n".join(sections) + "\n"


def build_explain_prompt(
    strategy: Strategy,
    debts: Sequence[Debt],
    currency: str = DEFAULT_CURRENCY,
) -> str:
    """Short prompt asking for a single strategy explanation against the current debts"""
    preamble = EXPLAIN_PREAMBLE.format(strategy=strategy.value, rule=STRATEGY_RULES[strategy])
    lines = format_debt_lines(debts, template=EXPLAIN_DEBT_LINE, currency=currency)
    return "\n\n".join([preamble, "\n".join([DEBTS_HEADER, *lines])]) + "\n"
