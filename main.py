"""Main orchestration script for extracting doc nodes and rendering HTML pages."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from docpages.library_label import is_library_url
from docpages.load_config import load_config


def run_command(
    cmd_list: Sequence[str | Path],
    cwd: Path | str | None = None,
    stdout_path: Path | None = None,
) -> None:
    """Run a command (optionally capturing stdout to a file) and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        if stdout_path is None:
            subprocess.run(cmd_list, check=True, cwd=cwd)
        else:
            with stdout_path.open("w", encoding="utf-8") as out:
                subprocess.run(cmd_list, check=True, cwd=cwd, stdout=out)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the full documentation pipeline for one module specifier."""
    parser = argparse.ArgumentParser(
        description="Extract doc nodes with `deno doc --json` and render HTML pages."
    )
    parser.add_argument(
        "url",
        help="Module specifier, e.g. deno.land/x/oak/mod.ts",
    )
    parser.add_argument(
        "--out",
        default="site_out",
        help="Output directory for the rendered pages (default: site_out)",
    )
    parser.add_argument(
        "--include-private",
        action="store_true",
        help="Keep nodes declared private",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    config = load_config(args.config)
    if is_library_url(args.url, config):
        raise SystemExit(
            f"Library specifier {args.url!r} has no module to extract. "
            "Write its doc nodes to a file and run docpages.render_docs on it."
        )

    root_dir = Path(__file__).parent
    out_dir = Path(args.out)
    out_dir.mkdir(parents=True, exist_ok=True)
    nodes_file = out_dir / "doc_nodes.json"

    # 1. Extract doc nodes using deno doc
    print("--- Step 1: Extracting doc nodes ---")
    target = args.url if "://" in args.url else f"https://{args.url}"
    run_command(["deno", "doc", "--json", target], stdout_path=nodes_file)

    # 2. Render HTML pages
    print("\n--- Step 2: Rendering HTML pages ---")
    cmd = [
        sys.executable,
        "-m",
        "docpages.render_docs",
        str(nodes_file),
        args.url,
        "--out",
        str(out_dir),
        "--all-items",
    ]
    if args.include_private:
        cmd.append("--include-private")
    if args.config:
        cmd.extend(["--config", args.config])

    run_command(cmd, cwd=root_dir)

    print(f"\nSUCCESS: Documentation rendered in {out_dir}")


if __name__ == "__main__":
    main()
