"""Built-in FAQ content used when no faq_path is configured."""

from typing import Any

DEFAULT_FAQ: dict[str, Any] = {
    "categories": [
        {
            "id": "general",
            "title": "About OpenLive",
            "questions": [
                {
                    "id": "what-is-openlive",
                    "question": "What is OpenLive?",
                    "answer": (
                        "OpenLive Group is a technology group founded in early 2021. "
                        "It provides solutions that help businesses go digital, "
                        "growing revenue and cutting operating costs.\n\n"
                        "Its vision is to become a leading multi-sector group in Asia, "
                        "offering technology, commerce and service solutions."
                    ),
                },
                {
                    "id": "business-license",
                    "question": "Is OpenLive registered to do business in Vietnam?",
                    "answer": (
                        "OpenLive holds all legal registrations required in Vietnam.\n"
                        "[A copy of the business license will be published here]"
                    ),
                },
                {
                    "id": "sub-companies",
                    "question": "Which companies belong to OpenLive?",
                    "answer": (
                        "The OpenLive ecosystem has five member companies:\n\n"
                        "1. OLabs - technology, blockchain, AI (https://olabs.net)\n"
                        "2. OMedia - media solutions\n"
                        "3. OProduct - product design and branding\n"
                        "4. OpenLive - high-quality music distribution\n"
                        "5. OBranding - digital e-commerce platform"
                    ),
                },
            ],
        },
        {
            "id": "products",
            "title": "Products & Services",
            "questions": [
                {
                    "id": "obranding",
                    "question": "What is OpenLive's flagship product?",
                    "answer": (
                        "OBranding, a digital e-commerce platform:\n\n"
                        "- Wider market reach\n"
                        "- End-to-end digital transformation support\n"
                        "- A connected partner ecosystem\n"
                        "- Member cards with exclusive offers"
                    ),
                },
                {
                    "id": "partners",
                    "question": "Who are the strategic partners?",
                    "answer": (
                        "Main partners:\n\n"
                        "- SOL International: supply chain optimization, since 2022\n"
                        "- Velicious Food: premium food distribution"
                    ),
                },
            ],
        },
        {
            "id": "investment",
            "title": "Investment & Shareholders",
            "questions": [
                {
                    "id": "become-shareholder",
                    "question": "How do I become a shareholder?",
                    "answer": (
                        "Three steps to own MBC:\n"
                        "1. Register an XT.com account\n"
                        "2. Deposit USDT into your wallet\n"
                        "3. Buy MBC tokens"
                    ),
                },
                {
                    "id": "investment-benefits",
                    "question": "What do shareholders receive?",
                    "answer": (
                        "1. Profit share from Monbase Exchange\n"
                        "2. Profit share from the NFT marketplace\n"
                        "3. MBC rewards when buying a shareholder card\n\n"
                        "Offer: the 1000 USD card costs 850 USD when paid in MBC."
                    ),
                },
                {
                    "id": "investment-notes",
                    "question": "What should I keep in mind?",
                    "answer": (
                        "- Invested funds are non-refundable\n"
                        "- Benefits are paid out yearly\n"
                        "- Shareholder status is permanent"
                    ),
                },
            ],
        },
        {
            "id": "contact",
            "title": "Contact",
            "questions": [
                {
                    "id": "contact-info",
                    "question": "How can I reach you?",
                    "answer": (
                        "Hotline: 0913831686 (24/7)\n"
                        "Zalo OA: zalo.me/knzata264\n\n"
                        "Office hours: Monday to Saturday, 8:00 - 17:00"
                    ),
                },
            ],
        },
    ],
    "metadata": {
        "last_updated": "2024-06-20",
        "version": "1.1.0",
        "welcome_text": "Welcome to OpenLive! Choose a topic to get started.",
        "contact": {
            "phone": "0913831686",
            "zalo": "https://zalo.me/g/knzata264",
            "working_hours": "Monday to Saturday (8:00 - 17:00)",
        },
    },
}
