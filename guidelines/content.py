from typing import Dict, List

GUIDELINES: List[Dict] = [
    {
        "title": "Risk Management",
        "points": [
            "Never risk more than 1-2% of your account on a single trade",
            "Always set a stop loss before entering a trade",
            "Don't move your stop loss once a trade is placed",
            "Ensure your risk-reward ratio is at least 1:2",
        ],
    },
    {
        "title": "Trading Psychology",
        "points": [
            "Stick to your trading plan and avoid emotional decisions",
            "Don't revenge trade after a loss",
            "Keep a trading journal to track and improve your performance",
            "Focus on consistent small wins rather than hitting home runs",
        ],
    },
    {
        "title": "Market Analysis",
        "points": [
            "Always check major economic news before trading",
            "Look for confluence between multiple timeframes",
            "Don't force trades - wait for clear setups",
            "Monitor market volatility and adjust position sizes accordingly",
        ],
    },
]

REMINDER = (
    "Remember: Preservation of capital is more important than making profits. "
    "A good trader is a surviving trader."
)

ABOUT: Dict = {
    "title": "Trading Risk Calculator",
    "summary": "A simple risk calculator for traders that helps you:",
    "features": [
        "Calculate safe position sizes based on your account balance",
        "Manage risk by setting exact dollar or percentage risk per trade",
        "Support for major instruments: Gold, Bitcoin, US30, NASDAQ, and S&P500",
        "Get precise lot sizes based on your stop loss level",
    ],
    "notes": [
        "Please make sure to edit the contract size according to your broker's settings",
        "This site doesn't store data - settings need to be adjusted each time you visit",
    ],
}

RECOMMENDED_RISK_HINT = "Recommended: 1-2% per trade"
