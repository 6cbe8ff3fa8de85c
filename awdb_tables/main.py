import argparse
from pathlib import Path
from typing import List, Optional

from awdb_tables.config import Settings
from awdb_tables.adapters.dataframe import to_dataframe
from awdb_tables.errors import AWDBTableError
from awdb_tables.ingestion.awdb_client import AWDBClient
from awdb_tables.table import NormalizedTable
from awdb_tables.transformation.parse_job import (
    parse_reference_data,
    parse_station_dataset,
    parse_station_forecasts,
    parse_station_metadata,
)
from awdb_tables.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="awdb-tables", description="Flatten AWDB REST API responses into tables.")
    parser.add_argument("--input", action="append", type=Path, default=[],
                        help="Parse a saved JSON response instead of calling the API (repeatable)")
    sub = parser.add_subparsers(dest="command", required=True)

    data = sub.add_parser("data", help="Station time series")
    data.add_argument("--stations", default="")
    data.add_argument("--elements", default="")
    data.add_argument("--begin-date")
    data.add_argument("--end-date")
    data.add_argument("--duration", default="DAILY")

    forecasts = sub.add_parser("forecasts", help="Station forecasts")
    forecasts.add_argument("--stations", default="")
    forecasts.add_argument("--elements")

    stations = sub.add_parser("stations", help="Station metadata")
    stations.add_argument("--stations", default="")
    stations.add_argument("--forecast-point", action="store_true")
    stations.add_argument("--reservoir", action="store_true")
    stations.add_argument("--station-elements", action="store_true")

    reference = sub.add_parser("reference", help="Reference vocabularies")
    reference.add_argument("reference_type")

    return parser

def fetch(client: AWDBClient, args: argparse.Namespace) -> str:
    if args.command == "data":
        return client.fetch_data(args.stations, args.elements, begin_date=args.begin_date,
                                 end_date=args.end_date, duration=args.duration)
    if args.command == "forecasts":
        return client.fetch_forecasts(args.stations, element_codes=args.elements)
    if args.command == "stations":
        return client.fetch_stations(args.stations,
                                     return_forecast_point_metadata=args.forecast_point,
                                     return_reservoir_metadata=args.reservoir,
                                     return_station_elements=args.station_elements)
    return client.fetch_reference_data(args.reference_type)

def parse(args: argparse.Namespace, documents: List[str]) -> NormalizedTable:
    if args.command == "data":
        return parse_station_dataset(documents)
    if args.command == "forecasts":
        return parse_station_forecasts(documents)
    if args.command == "stations":
        return parse_station_metadata(documents)
    return parse_reference_data(documents, args.reference_type)

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    s = Settings()
    setup_logging(s.log_level)

    if args.input:
        documents = [p.read_text(encoding="utf-8") for p in args.input]
    else:
        client = AWDBClient(s.awdb_base_url, timeout_s=s.request_timeout_s)
        documents = [fetch(client, args)]

    try:
        table = parse(args, documents)
    except AWDBTableError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Parsed {table.n_rows} rows x {table.n_columns} columns")
    print(to_dataframe(table).to_string())
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
