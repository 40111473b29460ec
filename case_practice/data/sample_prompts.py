"""
Bundled practice corpus used when CORPUS_SOURCE is "static" (local dev,
offline demos). Same shape as the hosted prompts.json.
"""

SAMPLE_PROMPTS = [
    # ==========================================================================
    # CLARIFYING
    # ==========================================================================
    {
        "id": "clar_coffee_01",
        "skill_type": "Clarifying",
        "title": "Coffee Chain Profit Decline",
        "prompt_text": (
            "Our client is a national coffee chain with 800 stores. Profits have "
            "fallen 15% over the past two years while revenue stayed flat.\n\n"
            "The CEO wants to understand what is happening and how to fix it."
        ),
        "exhibits": [],
    },
    # ==========================================================================
    # HYPOTHESIS
    # ==========================================================================
    {
        "id": "hyp_airline_01",
        "skill_type": "Hypothesis",
        "title": "Regional Airline Revenue",
        "prompt_text": (
            "A regional airline has seen revenue decline 10% year over year despite "
            "adding two new routes. Form a hypothesis about the root cause."
        ),
        "exhibits": [],
    },
    # ==========================================================================
    # FRAMEWORKS
    # ==========================================================================
    {
        "id": "fw_market_entry_01",
        "skill_type": "Frameworks",
        "title": "Electric Scooter Market Entry",
        "prompt_text": (
            "A European electric scooter rental company is considering entering the "
            "US market. How would you structure your approach to advise them?"
        ),
        "exhibits": [],
    },
    # ==========================================================================
    # ANALYSIS
    # ==========================================================================
    {
        "id": "an_retail_01",
        "skill_type": "Analysis",
        "title": "Grocery Retailer Margin Squeeze",
        "prompt_text": (
            "A grocery retailer has seen gross margin fall from 28% to 24%. "
            "Review each exhibit and explain what it tells you."
        ),
        "exhibits": [
            {
                "exhibit_title": "Category Performance",
                "description": "Revenue by category, $M",
                "chart_type": "table",
                "data": {
                    "Category": ["Fresh", "Packaged", "Household"],
                    "Previous Year": [420, 610, 180],
                    "Last Year": [455, 590, 176],
                },
            },
            {
                "exhibit_title": "Private Label Share",
                "chart_type": "line",
                "data": {
                    "Year": [2021, 2022, 2023, 2024],
                    "Share %": [22, 20, 17, 15],
                },
                "x_axis": "Year",
                "y_axis": "Share %",
                "summary_text": "Private label share fell seven points in three years.",
            },
        ],
    },
    # ==========================================================================
    # RECOMMENDATION
    # ==========================================================================
    {
        "id": "rec_telecom_01",
        "skill_type": "Recommendation",
        "title": "Telecom Churn Program",
        "prompt_text": (
            "A mobile operator has analysed rising churn. The CEO has five minutes "
            "and wants your recommendation."
        ),
        "exhibits": [
            {
                "exhibit_title": "Churn by Tenure",
                "chart_type": "bar",
                "data": {"Tenure": ["<1y", "1-3y", ">3y"], "Churn %": [31, 14, 6]},
                "x_axis": "Tenure",
                "y_axis": ["Churn %"],
            },
            {
                "exhibit_title": "Key Findings",
                "chart_type": "none",
                "summary_text": [
                    "Onboarding complaints doubled after the billing migration.",
                    "Competitor offers undercut entry plans by 12%.",
                ],
            },
        ],
    },
]
