"""
Investment suggestion catalog for DinDin.

Purpose
-------
Holds the fixed templates the recommendation selector draws from: for
every risk profile, exactly five domestic and five international
suggestions with preset allocations, plus a summary and warning
templates. The selector only picks a catalog and fills in the
narrative placeholders; nothing here is computed.

Placeholders
------------
Narrative fields are ``str.format`` templates. The selector provides:

- ``{age}``            investor age in years
- ``{income_level}``   "low", "medium" or "high"
- ``{income}``         formatted monthly income
- ``{available}``      formatted monthly amount available to invest
- ``{reserve}``        formatted six-month emergency reserve
- ``{budget_note}``    "a small starting amount" / "your budget"
- ``{wealth_note}``    "your current wealth" / "starting gradually"

Invariants
----------
- Each region tuple has exactly five templates
- Allocations of each region tuple sum to 100
- Catalog objects are immutable (frozen dataclasses, tuples, MappingProxyType)
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .types import Region, RiskLevel, RiskProfile

__all__ = [
    "SuggestionTemplate",
    "ProfileCatalog",
    "CATALOGS",
    "CAPACITY_WARNINGS",
    "catalog_for",
]


@dataclass(frozen=True)
class SuggestionTemplate:
    """
    One catalog entry.

    Parameters
    ----------
    name : str
        Display label of the product.
    allocation_percent : float
        Preset share of the region's portfolio (0-100).
    expected_return : str
        Free-text return description (fixed rate or range).
    risk_level : RiskLevel
    rationale : str
        Narrative template, see module docstring for placeholders.
    concept : str
        How the product works in theory.
    practical_steps : str
        How to buy it in practice.
    minimum_amount : float
        Minimum amount to start (R$).
    horizon : str
        Recommended holding period.
    region : Region
    """
    name: str
    allocation_percent: float
    expected_return: str
    risk_level: RiskLevel
    rationale: str
    concept: str
    practical_steps: str
    minimum_amount: float
    horizon: str
    region: Region


@dataclass(frozen=True)
class ProfileCatalog:
    """Suggestions, summary and warnings for one risk profile."""
    domestic: Tuple[SuggestionTemplate, ...]
    international: Tuple[SuggestionTemplate, ...]
    summary: str
    warnings: Tuple[str, ...]


_D = Region.DOMESTIC
_I = Region.INTERNATIONAL


# ---------------------------------------------------------------------------
# Conservative
# ---------------------------------------------------------------------------

_CONSERVATIVE = ProfileCatalog(
    domestic=(
        SuggestionTemplate(
            name="Tesouro Selic 2026",
            allocation_percent=25,
            expected_return="13,75% a.a.",
            risk_level=RiskLevel.LOW,
            rationale=(
                "With {income_level} income and a conservative profile, this is the "
                "safest investment in the country. Ideal for your emergency reserve "
                "with daily liquidity."
            ),
            concept=(
                "Tesouro Selic follows the economy's base interest rate (Selic). It is "
                "a floating-rate bond: its yield moves with the Selic rate."
            ),
            practical_steps=(
                "Use the official Tesouro Direto site or your broker. Start from R$ 30. "
                "Liquidity is daily, with IOF charged only in the first 30 days."
            ),
            minimum_amount=100,
            horizon="Any horizon",
            region=_D,
        ),
        SuggestionTemplate(
            name="CDB Banco Inter 105% CDI",
            allocation_percent=20,
            expected_return="14,43% a.a.",
            risk_level=RiskLevel.LOW,
            rationale=(
                "For {income_level} income, mid-sized banks pay better rates than the "
                "large ones. Covered by the FGC up to R$ 250 thousand."
            ),
            concept=(
                "A CDB is a loan you make to the bank. The bank lends your money to "
                "other clients and shares the interest with you."
            ),
            practical_steps=(
                "Open an account in the Banco Inter app. Look for CDBs paying above "
                "100% of the CDI. Pick daily liquidity if you may need the money."
            ),
            minimum_amount=500,
            horizon="1-3 years",
            region=_D,
        ),
        SuggestionTemplate(
            name="LCI Santander 95% CDI",
            allocation_percent=20,
            expected_return="13,05% a.a. (income tax exempt)",
            risk_level=RiskLevel.LOW,
            rationale=(
                "Being exempt from income tax, it delivers a higher net return for a "
                "conservative profile. Suitable at {age} years old."
            ),
            concept=(
                "An LCI funds the real estate sector. It is tax exempt for individuals, "
                "which raises its net return compared to other fixed income."
            ),
            practical_steps=(
                "Look for it at traditional banks such as Santander, Bradesco or Itau. "
                "Watch the lock-up period before you can redeem."
            ),
            minimum_amount=1000,
            horizon="2-5 years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Premium DI Funds",
            allocation_percent=15,
            expected_return="12,8% a.a.",
            risk_level=RiskLevel.LOW,
            rationale=(
                "Diversifies your fixed income with professional management. With "
                "{available} a month, suited to {wealth_note}."
            ),
            concept=(
                "DI funds hold fixed income securities that track the CDI. They offer "
                "professional management and automatic diversification."
            ),
            practical_steps=(
                "XP, Rico and BTG offer good DI funds. Check the management fee (at "
                "most 1% a.a.) and the performance history."
            ),
            minimum_amount=1000,
            horizon="1-2 years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Receivables FIDC",
            allocation_percent=20,
            expected_return="15,2% a.a.",
            risk_level=RiskLevel.MEDIUM,
            rationale=(
                "At {age} years old and with {income_level} income, you can take a "
                "little more risk for a better return."
            ),
            concept=(
                "FIDCs buy companies' receivables (invoices, promissory notes) and pay "
                "more than traditional fixed income."
            ),
            practical_steps=(
                "Available at brokers such as XP and Rico. Check the debtors' credit "
                "rating and how diversified the fund's portfolio is."
            ),
            minimum_amount=2500,
            horizon="2-4 years",
            region=_D,
        ),
    ),
    international=(
        SuggestionTemplate(
            name="US Treasury Bills (via ETF)",
            allocation_percent=25,
            expected_return="5,2% a.a. + currency variation",
            risk_level=RiskLevel.LOW,
            rationale=(
                "Currency diversification matters even for conservative investors at "
                "{age}. It protects against a weaker real and local crises."
            ),
            concept=(
                "Treasury Bills are very short-term US government bonds, considered "
                "the safest assets in the world."
            ),
            practical_steps=(
                "Buy the BIUS11 ETF on the Brazilian exchange or invest directly via "
                "Avenue or Passfolio with a competitive exchange rate."
            ),
            minimum_amount=1000,
            horizon="6 months - 2 years",
            region=_I,
        ),
        SuggestionTemplate(
            name="Global Bond ETF BNDX",
            allocation_percent=20,
            expected_return="4,8% a.a. + currency variation",
            risk_level=RiskLevel.LOW,
            rationale=(
                "Exposure to developed-market government bonds. Ideal for {income_level} "
                "income looking for international stability."
            ),
            concept=(
                "BNDX holds government bonds of developed countries (Europe, Japan, "
                "Canada) excluding the US, adding geographic diversification."
            ),
            practical_steps=(
                "Buy through international brokers such as Avenue, Passfolio or Inter "
                "Invest. Custody cost is low (0,05% a.a.)."
            ),
            minimum_amount=2000,
            horizon="3-7 years",
            region=_I,
        ),
        SuggestionTemplate(
            name="US Certificates of Deposit",
            allocation_percent=15,
            expected_return="5,5% a.a. + currency variation",
            risk_level=RiskLevel.LOW,
            rationale=(
                "US CDs are as safe as Brazilian ones and add currency diversification "
                "to {budget_note}."
            ),
            concept=(
                "The US equivalent of a CDB, issued by American banks and insured by "
                "the FDIC up to US$ 250 thousand."
            ),
            practical_steps=(
                "Available via Avenue, Stake or Interactive Brokers. Compare rates "
                "between banks of different sizes."
            ),
            minimum_amount=5000,
            horizon="1-3 years",
            region=_I,
        ),
        SuggestionTemplate(
            name="European Fixed Income Funds",
            allocation_percent=20,
            expected_return="3,2% a.a. + currency variation",
            risk_level=RiskLevel.LOW,
            rationale=(
                "Diversification into stable European markets. Suitable at {age} years "
                "old with a focus on preserving capital."
            ),
            concept=(
                "Funds holding high-quality European government and corporate bonds, "
                "offering stability and diversification."
            ),
            practical_steps=(
                "Access them via platforms such as XP Internacional or European brokers "
                "licensed in Brazil."
            ),
            minimum_amount=3000,
            horizon="2-5 years",
            region=_I,
        ),
        SuggestionTemplate(
            name="Defensive US REITs",
            allocation_percent=20,
            expected_return="8,5% a.a. + currency variation",
            risk_level=RiskLevel.MEDIUM,
            rationale=(
                "REITs in defensive sectors (healthcare, education) add international "
                "passive income with controlled risk for {income_level} income."
            ),
            concept=(
                "REITs are US real estate trusts that pay out at least 90% of profits "
                "as dividends. Defensive sectors are less volatile."
            ),
            practical_steps=(
                "Focus on healthcare (VTR, HCP) or storage (PSA, EXR) REITs via Avenue "
                "or Interactive Brokers."
            ),
            minimum_amount=4000,
            horizon="5-10 years",
            region=_I,
        ),
    ),
    summary=(
        "Conservative strategy tailored for {age} years old and {income_level} income. "
        "Focus on preserving capital with a positive real return. Splitting between "
        "Brazil (60%) and abroad (40%) reduces systemic risk. Expected return: "
        "11-14% a.a. with low volatility."
    ),
    warnings=(
        "With {budget_note} of {available} a month, start with the products that have "
        "the lowest minimum amount.",
        "Keep six months of expenses ({reserve}) in Tesouro Selic before investing in "
        "other assets.",
        "Avoid investments without FGC/FDIC coverage above the insured limits.",
        "Rebalance the portfolio every six months to keep the target proportions.",
    ),
)


# ---------------------------------------------------------------------------
# Moderate
# ---------------------------------------------------------------------------

_MODERATE = ProfileCatalog(
    domestic=(
        SuggestionTemplate(
            name="Tesouro IPCA+ 2035",
            allocation_percent=20,
            expected_return="6,2% + IPCA a.a.",
            risk_level=RiskLevel.LOW,
            rationale=(
                "Inflation protection is essential at {age} years old. It preserves "
                "real purchasing power over time."
            ),
            concept=(
                "A hybrid bond paying a fixed rate plus inflation (IPCA). It protects "
                "against the loss of purchasing power."
            ),
            practical_steps=(
                "Ideal for long-term goals. Buy it on Tesouro Direto or through your "
                "broker and preferably hold it to maturity."
            ),
            minimum_amount=200,
            horizon="10+ years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Blue Chip Stocks (ITUB4, VALE3, PETR4)",
            allocation_percent=25,
            expected_return="16-22% a.a.",
            risk_level=RiskLevel.MEDIUM,
            rationale=(
                "For {income_level} income at {age} years old, shares of established "
                "companies offer growth with controlled risk."
            ),
            concept=(
                "Blue chips are shares of large, stable companies with a consistent "
                "record of profits and dividends."
            ),
            practical_steps=(
                "Buy through a home broker. Stick to businesses you understand: ITUB4 "
                "(bank), VALE3 (mining), PETR4 (oil)."
            ),
            minimum_amount=1000,
            horizon="5+ years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Diversified Real Estate Funds",
            allocation_percent=20,
            expected_return="12-15% a.a.",
            risk_level=RiskLevel.MEDIUM,
            rationale=(
                "FIIs pay monthly income exempt from income tax, a good complement to "
                "your {income} monthly income."
            ),
            concept=(
                "Funds that own commercial real estate and distribute the rent. "
                "Monthly dividends are tax exempt for individuals."
            ),
            practical_steps=(
                "Diversify across types: HGLG11 (logistics), XPML11 (malls), MXRF11 "
                "(mixed). Buy through your broker."
            ),
            minimum_amount=1500,
            horizon="5+ years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Long & Short Multimarket Funds",
            allocation_percent=15,
            expected_return="14-18% a.a.",
            risk_level=RiskLevel.MEDIUM,
            rationale=(
                "Active management to capture opportunities in any scenario. Suitable "
                "for {income_level} income with some tolerance to volatility."
            ),
            concept=(
                "Funds that can buy and short-sell assets, generating alpha regardless "
                "of market direction."
            ),
            practical_steps=(
                "Verde AM, Kapitalo and ARX run good multimarket funds. Review their "
                "performance and volatility history."
            ),
            minimum_amount=5000,
            horizon="3-7 years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Incentivized Debentures",
            allocation_percent=20,
            expected_return="IPCA + 5-7% a.a.",
            risk_level=RiskLevel.MEDIUM,
            rationale=(
                "Tax exemption and an attractive return. At {age} years old, it offers "
                "controlled credit risk with a tax benefit."
            ),
            concept=(
                "Corporate debt issued to fund infrastructure projects. Exempt from "
                "income tax, which raises the net return."
            ),
            practical_steps=(
                "Available via XP, Rico and BTG. Check the issuer's rating and spread "
                "your money across issuers."
            ),
            minimum_amount=1000,
            horizon="4-8 years",
            region=_D,
        ),
    ),
    international=(
        SuggestionTemplate(
            name="S&P 500 ETF (IVVB11 or direct)",
            allocation_percent=30,
            expected_return="10-12% a.a. + currency variation",
            risk_level=RiskLevel.MEDIUM,
            rationale=(
                "Exposure to the 500 largest US companies. Essential at {age} years old "
                "to build international wealth."
            ),
            concept=(
                "An index of the 500 largest US companies by market value, giving "
                "automatic diversification across the best businesses in the world."
            ),
            practical_steps=(
                "IVVB11 in Brazil (more expensive) or VTI/SPY directly via Avenue or "
                "Passfolio (cheaper). Invest the same amount every month."
            ),
            minimum_amount=1000,
            horizon="10+ years",
            region=_I,
        ),
        SuggestionTemplate(
            name="Emerging Markets ETF (VWO)",
            allocation_percent=20,
            expected_return="8-15% a.a. + currency variation",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "Diversification into emerging countries with higher growth potential. "
                "Suitable at {age} years old."
            ),
            concept=(
                "VWO holds stocks from emerging countries (China, India, Taiwan). More "
                "growth potential, more volatility."
            ),
            practical_steps=(
                "Buy through international brokers. Treat it as a satellite position, "
                "not the core of the portfolio."
            ),
            minimum_amount=2000,
            horizon="7+ years",
            region=_I,
        ),
        SuggestionTemplate(
            name="Diversified REITs (VNQ)",
            allocation_percent=15,
            expected_return="9-13% a.a. + currency variation",
            risk_level=RiskLevel.MEDIUM,
            rationale=(
                "US real estate adds diversification and international passive income "
                "to complement Brazilian FIIs for {income_level} income."
            ),
            concept=(
                "VNQ holds REITs from every US real estate sector and pays quarterly "
                "dividends."
            ),
            practical_steps=(
                "Via Avenue, Passfolio or Interactive Brokers. Pairs well with "
                "Brazilian FIIs and adds currency exposure."
            ),
            minimum_amount=3000,
            horizon="5+ years",
            region=_I,
        ),
        SuggestionTemplate(
            name="High Grade Corporate Bonds",
            allocation_percent=20,
            expected_return="5-7% a.a. + currency variation",
            risk_level=RiskLevel.LOW,
            rationale=(
                "AAA/AA rated US corporate bonds. International stability to balance "
                "the equities bought with your {available} a month."
            ),
            concept=(
                "Debt of highly rated US companies: less risk than stocks, more return "
                "than government bonds."
            ),
            practical_steps=(
                "ETFs such as LQD or TLT give diversified exposure. Available through "
                "international brokers."
            ),
            minimum_amount=4000,
            horizon="3-7 years",
            region=_I,
        ),
        SuggestionTemplate(
            name="Selected Growth Stocks",
            allocation_percent=15,
            expected_return="15-25% a.a. + currency variation",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "At {age} years old, growth companies offer higher long-term "
                "appreciation potential."
            ),
            concept=(
                "Shares of companies with fast revenue and profit growth. More "
                "volatile, with higher return potential."
            ),
            practical_steps=(
                "Stick to sectors you understand: technology (MSFT, GOOGL), healthcare "
                "(JNJ, PFE), consumer (AMZN, TSLA)."
            ),
            minimum_amount=5000,
            horizon="10+ years",
            region=_I,
        ),
    ),
    summary=(
        "Moderate strategy for {age} years old with {income_level} income. A balance "
        "between fixed income (40%) and equities (60%) for sustainable growth. Global "
        "diversification reduces dependence on the Brazilian market. Expected return: "
        "14-18% a.a."
    ),
    warnings=(
        "Moderate volatility: be ready for 15-25% swings during crises.",
        "Rebalance every quarter, selling what went up and buying what went down.",
        "Keep a six-month reserve ({reserve}) outside the portfolio.",
        "With {available} a month available, prioritize consistent contributions.",
    ),
)


# ---------------------------------------------------------------------------
# Aggressive
# ---------------------------------------------------------------------------

_AGGRESSIVE = ProfileCatalog(
    domestic=(
        SuggestionTemplate(
            name="Small Caps Growth (SMLL11)",
            allocation_percent=30,
            expected_return="20-35% a.a.",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "At {age} years old with an aggressive profile, small caps offer "
                "exceptional long-term growth potential."
            ),
            concept=(
                "Small companies with fast growth potential. More volatile, with "
                "historically higher returns."
            ),
            practical_steps=(
                "SMLL11 tracks the small caps index. Buy through your home broker with "
                "monthly contributions to smooth out timing."
            ),
            minimum_amount=1000,
            horizon="10+ years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Selected Growth Stocks",
            allocation_percent=25,
            expected_return="18-28% a.a.",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "Stock picking in above-average growers. Suitable for {income_level} "
                "income and a high tolerance to risk."
            ),
            concept=(
                "Companies whose revenue and profits grow faster than the market, "
                "focused on innovation and expansion."
            ),
            practical_steps=(
                "Magazine Luiza (MGLU3), Locaweb (LWSA3), Meliuz (CASH3). Study the "
                "fundamentals before buying."
            ),
            minimum_amount=2000,
            horizon="7+ years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Long & Short Equity Funds",
            allocation_percent=20,
            expected_return="16-25% a.a.",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "Sophisticated active management to capture alpha in volatile markets. "
                "Ideal for experienced investors at {age} years old."
            ),
            concept=(
                "Funds that go long and short on stocks, generating returns regardless "
                "of market direction."
            ),
            practical_steps=(
                "Verde, Kapitalo and Garde run long & short strategies. Review the "
                "manager's track record and strategy."
            ),
            minimum_amount=10000,
            horizon="5+ years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Crypto ETFs (QETH11, QBTC11)",
            allocation_percent=15,
            expected_return="50-100% a.a. (high volatility)",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "At {age} years old, controlled exposure to cryptocurrencies offers "
                "exponential growth potential."
            ),
            concept=(
                "ETFs tracking Bitcoin and Ethereum: regulated crypto exposure without "
                "managing digital wallets."
            ),
            practical_steps=(
                "QBTC11 (Bitcoin) and QETH11 (Ethereum) via home broker. Keep them to "
                "5-10% of the whole portfolio."
            ),
            minimum_amount=500,
            horizon="5-10 years",
            region=_D,
        ),
        SuggestionTemplate(
            name="Growth Stock BDRs",
            allocation_percent=10,
            expected_return="15-30% a.a.",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "Access to US growth companies through the Brazilian exchange. "
                "Convenient for {income_level} income."
            ),
            concept=(
                "Brazilian Depositary Receipts mirror foreign shares on the Brazilian "
                "exchange and are taxed like domestic stocks."
            ),
            practical_steps=(
                "Tesla (TSLA34), Apple (AAPL34), Microsoft (MSFT34) via a Brazilian "
                "home broker. IOF of 0,38% on purchase."
            ),
            minimum_amount=1000,
            horizon="5+ years",
            region=_D,
        ),
    ),
    international=(
        SuggestionTemplate(
            name="NASDAQ ETF (QQQ)",
            allocation_percent=35,
            expected_return="12-20% a.a. + currency variation",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "Pure exposure to US technology companies. At {age} years old, "
                "capturing global innovation is essential."
            ),
            concept=(
                "QQQ tracks the 100 largest non-financial NASDAQ companies, "
                "concentrated in technology and innovation."
            ),
            practical_steps=(
                "Buy via Avenue, Passfolio or Interactive Brokers. Invest monthly to "
                "reduce the effect of volatility."
            ),
            minimum_amount=2000,
            horizon="10+ years",
            region=_I,
        ),
        SuggestionTemplate(
            name="Individual Growth Stocks",
            allocation_percent=25,
            expected_return="20-40% a.a. + currency variation",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "International stock picking for {income_level} income. Exceptional "
                "return potential with disruptive companies."
            ),
            concept=(
                "Individually selected stocks with superior growth potential. Requires "
                "deep fundamental research."
            ),
            practical_steps=(
                "Tesla (TSLA), Nvidia (NVDA), Netflix (NFLX), Amazon (AMZN). Spread "
                "across 8-12 companies."
            ),
            minimum_amount=5000,
            horizon="7+ years",
            region=_I,
        ),
        SuggestionTemplate(
            name="Emerging Markets ETF (VWO)",
            allocation_percent=15,
            expected_return="10-25% a.a. + currency variation",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "Emerging markets offer higher growth with high volatility. Suitable "
                "at {age} years old."
            ),
            concept=(
                "Exposure to China, India, Taiwan and other emerging countries with "
                "above-average growth potential."
            ),
            practical_steps=(
                "VWO via international brokers. Also consider single-country ETFs "
                "(FXI for China)."
            ),
            minimum_amount=3000,
            horizon="10+ years",
            region=_I,
        ),
        SuggestionTemplate(
            name="Innovation ETFs (ARKK, ICLN)",
            allocation_percent=15,
            expected_return="15-35% a.a. + currency variation",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "ETFs focused on innovation and disruption, for an aggressive profile "
                "at {age} years old seeking exponential growth."
            ),
            concept=(
                "Thematic funds investing in disruptive sectors such as clean energy, "
                "genomics and space exploration."
            ),
            practical_steps=(
                "ARKK (innovation), ICLN (clean energy), ARKQ (automation) via "
                "international brokers."
            ),
            minimum_amount=4000,
            horizon="10+ years",
            region=_I,
        ),
        SuggestionTemplate(
            name="Direct Cryptocurrency",
            allocation_percent=10,
            expected_return="30-200% a.a. (extreme volatility)",
            risk_level=RiskLevel.HIGH,
            rationale=(
                "At {age} years old with maximum risk tolerance, direct crypto "
                "exposure offers transformative potential. Keep it small within "
                "your {available} a month."
            ),
            concept=(
                "Direct investment in Bitcoin, Ethereum and other cryptocurrencies "
                "through regulated exchanges."
            ),
            practical_steps=(
                "Binance, Coinbase or Kraken for direct purchase. Buy in monthly "
                "installments and keep it to 5% of the portfolio."
            ),
            minimum_amount=1000,
            horizon="5-15 years",
            region=_I,
        ),
    ),
    summary=(
        "Aggressive strategy for {age} years old with {income_level} income. Focus on "
        "maximum growth with 80% in equities. Global diversification in growth "
        "companies and disruptive sectors. Expected return: 18-25% a.a. with high "
        "volatility."
    ),
    warnings=(
        "High volatility: be ready for 30-50% swings during crises.",
        "Never put more than 10% into cryptocurrencies or speculative assets.",
        "Stay disciplined in bear markets, they are accumulation opportunities.",
        "With {available} a month available, keep contributing regardless of the market.",
    ),
)


CATALOGS: Mapping[RiskProfile, ProfileCatalog] = MappingProxyType({
    RiskProfile.CONSERVATIVE: _CONSERVATIVE,
    RiskProfile.MODERATE: _MODERATE,
    RiskProfile.AGGRESSIVE: _AGGRESSIVE,
})
"""Read-only catalog per risk profile."""


def catalog_for(risk_profile: RiskProfile) -> ProfileCatalog:
    """Return the catalog of *risk_profile* (accepts the enum or its value)."""
    return CATALOGS[RiskProfile(risk_profile)]


CAPACITY_WARNINGS: Mapping[RiskLevel, str] = MappingProxyType({
    RiskLevel.HIGH: (
        "At {age} years old you have decades to recover from downturns: keep "
        "contributing through them instead of selling."
    ),
    RiskLevel.MEDIUM: (
        "At {age} years old, balance growth with stability and review the allocation "
        "once a year."
    ),
    RiskLevel.LOW: (
        "At {age} years old, protect what you have built and move gradually towards "
        "low-risk assets as retirement approaches."
    ),
})
"""Age-driven warning per capacity to absorb losses."""
