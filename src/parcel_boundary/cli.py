"""
Command-line interface for the parcel boundary engine

Usage:
    parcel-boundary save --parcel-id PARCEL-001 --geojson boundary.json
    parcel-boundary get --parcel-id PARCEL-001
    parcel-boundary overlaps --parcel-id PARCEL-001
    parcel-boundary validate --geojson boundary.json
    parcel-boundary export --output boundaries.geojson
"""

import sys
import json
import argparse
from dataclasses import replace

from loguru import logger

from .config import get_config, load_config_from_env, validate_config
from .errors import InvalidGeometryError, ParcelBoundaryError
from .geometry import parse_geometry
from .service import ParcelBoundaryService
from .store import create_store


def setup_logging(verbose: bool = False, level: str = "INFO"):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else level
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def build_service(args) -> ParcelBoundaryService:
    """Create the service over the store selected by config and --store-dir"""
    config = load_config_from_env(get_config())
    if args.store_dir:
        config = replace(config, store_dir=args.store_dir, store_backend="json")
    validate_config(config)
    return ParcelBoundaryService(create_store(config))


def load_geojson(path: str):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def print_json(data):
    print(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def cmd_save(args):
    """Validate and store a parcel boundary"""
    service = build_service(args)
    record = service.save_boundary(args.parcel_id, load_geojson(args.geojson))
    
    logger.info(f"✓ Saved: {record.parcel_id}")
    logger.info(f"  Area: {record.area_sqm:.2f} m²")
    print_json(record.model_dump(mode="json"))
    return 0


def cmd_get(args):
    """Print a stored parcel boundary"""
    service = build_service(args)
    record = service.get_boundary(args.parcel_id)
    print_json(record.model_dump(mode="json"))
    return 0


def cmd_overlaps(args):
    """List parcels sharing vertices with a parcel"""
    service = build_service(args)
    overlaps = service.find_potential_overlaps(args.parcel_id)
    
    if not overlaps:
        logger.info(f"No potential overlaps for parcel {args.parcel_id}")
    for overlap in overlaps:
        logger.info(f"  {overlap.parcel_id}: {overlap.shared_vertex_count} shared vertices")
    
    print_json([o.model_dump() for o in overlaps])
    return 0


def cmd_validate(args):
    """Check a GeoJSON geometry file without storing it"""
    try:
        geometry = parse_geometry(load_geojson(args.geojson))
    except InvalidGeometryError as e:
        logger.error(f"✗ {args.geojson}: {e.reason}")
        return 1
    
    logger.info(f"✓ {args.geojson}: valid {geometry.type}")
    return 0


def cmd_export(args):
    """Write every stored boundary as a GeoJSON FeatureCollection"""
    service = build_service(args)
    records = service.store.list_all()
    
    collection = {
        "type": "FeatureCollection",
        "features": [r.to_geojson() for r in records]
    }
    with open(args.output, "w", encoding="utf-8") as f:
        json.dump(collection, f, indent=2, ensure_ascii=False)
    
    logger.info(f"✓ Exported {len(records)} boundaries to {args.output}")
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Parcel boundary geometry engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  parcel-boundary save --parcel-id PARCEL-001 --geojson boundary.json
  parcel-boundary overlaps --parcel-id PARCEL-001 --store-dir ./boundaries
        """
    )
    parser.add_argument("--store-dir", help="Directory of the JSON boundary store")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    
    subparsers = parser.add_subparsers(dest="command", help="Commands")
    
    save_parser = subparsers.add_parser("save", help="Validate and store a parcel boundary")
    save_parser.add_argument("--parcel-id", required=True, help="Parcel ID")
    save_parser.add_argument("--geojson", required=True, help="GeoJSON Polygon/MultiPolygon file")
    save_parser.set_defaults(func=cmd_save)
    
    get_parser = subparsers.add_parser("get", help="Show a stored parcel boundary")
    get_parser.add_argument("--parcel-id", required=True, help="Parcel ID")
    get_parser.set_defaults(func=cmd_get)
    
    overlaps_parser = subparsers.add_parser("overlaps", help="Find parcels sharing vertices")
    overlaps_parser.add_argument("--parcel-id", required=True, help="Parcel ID")
    overlaps_parser.set_defaults(func=cmd_overlaps)
    
    validate_parser = subparsers.add_parser("validate", help="Validate a GeoJSON geometry file")
    validate_parser.add_argument("--geojson", required=True, help="GeoJSON Polygon/MultiPolygon file")
    validate_parser.set_defaults(func=cmd_validate)
    
    export_parser = subparsers.add_parser("export", help="Export all boundaries as a FeatureCollection")
    export_parser.add_argument("--output", "-o", required=True, help="Output GeoJSON file")
    export_parser.set_defaults(func=cmd_export)
    
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    setup_logging(args.verbose, load_config_from_env(get_config()).log_level)
    
    try:
        return args.func(args)
    except ParcelBoundaryError as e:
        logger.error(f"✗ {e}")
        return 1
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"✗ {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
