"""
Static catalog of the Axion tools.

Each ToolDefinition doubles as the endpoint table entry for that tool: ``path``
is a template whose ``{placeholders}`` are filled from required arguments, and
every other declared parameter is eligible for the query string, in declaration
order.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from mcp import types


@dataclass(frozen=True)
class Parameter:
    name: str
    description: str
    type: str = "string"
    required: bool = False
    # Text after "Error: " when a required value is missing
    missing_message: Optional[str] = None
    # Additional JSON-schema keys as (key, value) pairs
    extra: Tuple[Tuple[str, Any], ...] = ()

    def schema(self) -> Dict[str, Any]:
        schema = {"type": self.type, "description": self.description}
        schema.update(dict(self.extra))
        return schema


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    path: str
    parameters: Tuple[Parameter, ...] = ()

    @property
    def required(self) -> List[Parameter]:
        return [p for p in self.parameters if p.required]

    def input_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.schema() for p in self.parameters},
        }
        required = [p.name for p in self.required]
        if required:
            schema["required"] = required
        return schema

    def to_tool(self) -> types.Tool:
        return types.Tool(name=self.name, description=self.description, inputSchema=self.input_schema())


STOCK_TICKER = "Stock ticker symbol (e.g., 'AAPL' for Apple)"
ETF_TICKER = "ETF ticker symbol (e.g., 'SPY' for SPDR S&P 500 ETF Trust)"
CRYPTO_TICKER = "Cryptocurrency ticker symbol (e.g., 'BTC', 'ETH')"
FOREX_TICKER = "Forex ticker symbol (e.g., 'AEDAUD', 'EURUSD')"
FUTURE_TICKER = "Futures ticker symbol (e.g., 'ALI', 'M6A', 'BTC')"
INDEX_TICKER = "Index ticker symbol (e.g., 'AXJO', 'AEX', 'ATX')"
EQUITY_TICKER = "Stock ticker symbol (e.g., 'AAPL', 'MSFT', 'TSLA')"


def ticker(description: str = STOCK_TICKER, missing: str = "Ticker symbol is required") -> Parameter:
    return Parameter("ticker", description, required=True, missing_message=missing)


def required(name: str, description: str, missing: str) -> Parameter:
    return Parameter(name, description, required=True, missing_message=missing)


def optional(name: str, description: str, type: str = "string", **extra: Any) -> Parameter:
    return Parameter(name, description, type=type, extra=tuple(extra.items()))


def ticker_tool(name: str, description: str, path: str, param: Optional[Parameter] = None) -> ToolDefinition:
    return ToolDefinition(name, description, path, (param or ticker(),))


# (tool suffix, path under profiles/{ticker}/, description)
_PROFILES = [
    ("asset", "asset", "Get asset profile information for a specific ticker"),
    ("recommendation", "recommendation", "Get recommendation trend for a specific ticker"),
    ("cashflow", "cashflow", "Get cash flow statement history for a specific ticker"),
    ("trend_index", "trend/index", "Get index trend information for a specific ticker"),
    ("statistics", "statistics", "Get default key statistics for a specific ticker"),
    ("income", "income", "Get income statement history for a specific ticker"),
    ("fund", "fund", "Get fund ownership data for a specific ticker"),
    ("summary", "summary", "Get summary detail information for a specific ticker"),
    ("insiders", "insiders", "Get insider holders information for a specific ticker"),
    ("calendar", "calendar", "Get calendar events for a specific ticker"),
    ("balancesheet", "balancesheet", "Get balance sheet history for a specific ticker"),
    ("trend_earnings", "trend/earnings", "Get earnings trend for a specific ticker"),
    ("institution", "institution", "Get institution ownership data for a specific ticker"),
    ("ownership", "ownership", "Get major holders breakdown for a specific ticker"),
    ("earnings", "earnings", "Get earnings history for a specific ticker"),
    ("info", "info", "Get summary profile information for a specific ticker"),
    ("activity", "activity", "Get net share purchase activity for a specific ticker"),
    ("transactions", "transactions", "Get insider transactions for a specific ticker"),
    ("financials", "financials", "Get financial data for a specific ticker"),
    ("traffic", "traffic", "Get website traffic data for a specific ticker"),
]


def _asset_class(prefix: str, label: str, prices_label: str, ticker_description: str, missing: str,
                 list_description: str, filters: List[Parameter]) -> List[ToolDefinition]:
    """The tickers / ticker / prices trio shared by every market data asset class."""
    param = ticker(ticker_description, missing)
    return [
        ToolDefinition(f"{prefix}_tickers", list_description, f"{prefix}/tickers", tuple(filters)),
        ticker_tool(f"{prefix}_ticker", f"Get details for a specific {label} by ticker symbol",
                    f"{prefix}/{{ticker}}", param),
        ticker_tool(f"{prefix}_prices", f"Get historical price data for {prices_label}",
                    f"{prefix}/{{ticker}}/prices", param),
    ]


CATALOG: Tuple[ToolDefinition, ...] = tuple([
    ToolDefinition(
        "credit_search",
        "Search for credit entities by name, sector, country, or state",
        "credit/search",
        (optional("query", "Search query (organization name)"),),
    ),
    ToolDefinition(
        "credit_ratings",
        "Get credit ratings for a specific organization by ID",
        "credit/ratings/{id}",
        (required("id", "Organization ID (from search results)", "Organization ID is required"),),
    ),
    ToolDefinition(
        "econ_search",
        "Search for economic datasets (FRED)",
        "econ/search",
        (required("query", "Search query for economic indicators", "Search query is required"),),
    ),
    ToolDefinition(
        "econ_dataset",
        "Get economic dataset time series data by ID",
        "econ/dataset/{id}",
        (required("id", "Dataset ID (from search results, e.g., 'PMAIZMTUSDM')", "Dataset ID is required"),),
    ),
    ToolDefinition(
        "econ_calendar",
        "Get economic calendar events with filtering options",
        "econ/calendar",
        (
            optional("from", "Start date (YYYY-MM-DD)"),
            optional("to", "End date (YYYY-MM-DD)"),
            optional("country", "Country code or comma-separated list (e.g., 'US' or 'US,GB,JP')"),
            optional("minImportance", "Minimum importance level (0-3, where 3 is highest)",
                     type="integer", minimum=-1, maximum=3),
            optional("currency", "Currency code or comma-separated list (e.g., 'USD' or 'USD,EUR,GBP')"),
            optional("category", "Category or comma-separated list (e.g., 'gov' or 'gov,infl')"),
        ),
    ),
    ticker_tool("esg_data", "Get ESG (Environmental, Social, Governance) scores for a specific ticker",
                "esg/{ticker}"),
    ticker_tool("etf_fund", "Get ETF fund information including ratings, metrics, and classification",
                "etf/{ticker}/fund", ticker(ETF_TICKER, "ETF ticker symbol is required")),
    ticker_tool("etf_weights", "Get ETF sector and region allocation weights",
                "etf/{ticker}/weights", ticker(ETF_TICKER, "ETF ticker symbol is required")),
    ticker_tool("etf_holdings", "Get ETF top holdings including weight, shares, and market value",
                "etf/{ticker}/holdings", ticker(ETF_TICKER, "ETF ticker symbol is required")),
    ticker_tool("etf_exposure", "Get which other ETFs hold a specific ticker (inverse exposure)",
                "etf/{ticker}/exposure",
                ticker("Stock ticker symbol (e.g., 'AAPL' for Apple) to find ETFs that hold it")),
    ticker_tool("news_ticker", "Get news for a specific company by ticker symbol", "news/{ticker}"),
    ToolDefinition(
        "news_country",
        "Get news for a specific country",
        "news/country/{country}",
        (required("country", "Country name or code (e.g., 'US', 'United States')",
                  "Country parameter is required"),),
    ),
    ToolDefinition(
        "news_category",
        "Get news for a specific category",
        "news/category/{category}",
        (required("category", "News category (e.g., 'business', 'technology', 'politics')",
                  "Category parameter is required"),),
    ),
    ToolDefinition("news_general", "Get general news headlines", "news"),
    ticker_tool("sentiment_social",
                "Get social media sentiment for a specific ticker (from Google, Reddit, Twitter)",
                "sentiment/{ticker}/social"),
    ticker_tool("sentiment_news", "Get news sentiment for a specific ticker", "sentiment/{ticker}/news"),
    ticker_tool("sentiment_analyst", "Get analyst/AI sentiment for a specific ticker", "sentiment/{ticker}/analyst"),
    ticker_tool("supply_chain_customers", "Get supply chain customers for a specific company by ticker symbol",
                "supply-chain/{ticker}/customers"),
    ticker_tool("supply_chain_peers",
                "Get supply chain peers (competitors) for a specific company by ticker symbol",
                "supply-chain/{ticker}/peers"),
    ticker_tool("supply_chain_suppliers", "Get supply chain suppliers for a specific company by ticker symbol",
                "supply-chain/{ticker}/suppliers"),
    *[
        ticker_tool(f"profiles_{name}", description, f"profiles/{{ticker}}/{suffix}")
        for name, suffix, description in _PROFILES
    ],
    *_asset_class(
        "crypto", "cryptocurrency", "a cryptocurrency ticker", CRYPTO_TICKER, "Cryptocurrency ticker symbol is required",
        "Get list of cryptocurrency tickers, optionally filtered by type",
        [optional("type", "Filter by type (e.g., 'spot')")],
    ),
    *_asset_class(
        "forex", "forex pair", "a forex ticker", FOREX_TICKER, "Forex ticker symbol is required",
        "Get list of forex tickers with optional filtering by country or exchange",
        [
            optional("country", "Filter by country code (e.g., 'US', 'AE')"),
            optional("exchange", "Filter by exchange (e.g., 'IDC')"),
        ],
    ),
    *_asset_class(
        "future", "futures contract", "a futures contract", FUTURE_TICKER, "Futures ticker symbol is required",
        "Get list of futures tickers with optional filtering by exchange",
        [optional("exchange", "Filter by exchange (e.g., 'CME', 'CMX')")],
    ),
    *_asset_class(
        "indices", "index", "an index", INDEX_TICKER, "Index ticker symbol is required",
        "Get list of index tickers with optional filtering by exchange",
        [optional("exchange", "Filter by exchange (e.g., 'ASX', 'AMS', 'VIE')")],
    ),
    *_asset_class(
        "stocks", "stock", "a stock", EQUITY_TICKER, "Stock ticker symbol is required",
        "Get list of stock tickers with optional filtering by country or exchange",
        [
            optional("country", "Filter by country (e.g., 'america')"),
            optional("exchange", "Filter by exchange (e.g., 'NASDAQ', 'AMEX', 'OTC')"),
        ],
    ),
])

_BY_NAME: Dict[str, ToolDefinition] = {}
for _definition in CATALOG:
    if _definition.name in _BY_NAME:
        raise RuntimeError(f"Duplicate tool name in catalog: {_definition.name}")
    _BY_NAME[_definition.name] = _definition


def list_tools() -> List[ToolDefinition]:
    return list(CATALOG)


def get_tool(name: str) -> Optional[ToolDefinition]:
    return _BY_NAME.get(name)
