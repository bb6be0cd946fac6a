"""
Dump Steam's appinfo.vdf (binary VDF) from the command line.

Usage:
    python parse_appinfo.py [path/to/appinfo.vdf] [appid ...]

Without appids, prints a summary and a few sample apps. With appids,
prints each app's decoded tree as JSON.
"""
import json
import os
import sys

from appshelf import config
from appshelf.vdf import VdfError, load_file


def dump_appinfo(appinfo_path, appids=None):
    """
    Decode appinfo.vdf and print its contents.

    Args:
        appinfo_path: Path to appinfo.vdf file
        appids: App IDs to dump as JSON (None = summary only)

    Returns:
        Exit status for the script
    """
    print(f"📁 Parsing: {appinfo_path}")
    if os.path.exists(appinfo_path):
        print(f"📊 File size: {os.path.getsize(appinfo_path) / (1024*1024):.2f} MB\n")

    try:
        document = load_file(appinfo_path, max_depth=config.MAX_DEPTH)
    except VdfError as e:
        print(f"❌ Error parsing appinfo: {e}")
        return 1

    print(f"✅ Parsed {len(document)} apps from appinfo.vdf\n")

    if not appids:
        print("📋 Sample apps:")
        for appid, details in list(document.items())[:10]:
            name = details["common"].get_string("name") or "N/A"
            app_type = details["common"].get_string("type") or "?"
            print(f"  {appid:>8}: {name} ({app_type})")
        return 0

    status = 0
    for appid in appids:
        details = document.get(appid)
        if details is None:
            print(f"⚠️  App {appid} not found")
            status = 1
            continue
        print(json.dumps({str(appid): details.to_python()}, indent=2, ensure_ascii=False))
    return status


if __name__ == '__main__':
    # Default Steam path
    appinfo_path = str(config.APPINFO_PATH)
    args = sys.argv[1:]

    # Allow override via command line
    if args and not args[0].isdigit():
        appinfo_path = args.pop(0)

    sys.exit(dump_appinfo(appinfo_path, [int(a) for a in args]))
