#!/usr/bin/env python3
"""
CLI for the storage proof toolkit.

Reads the target block, account and storage slot from the environment
(MAINNET_RPC, BLOCK_NUMBER, TARGET_ACCOUNT, STORAGE_SLOT; a .env file is
honoured) and prints the circuit parameters as `name = value` lines.

Examples:
  storage-proof-params gen_prove_params
  storage-proof-params gen_verify_params
  storage-proof-params gen_prove_params --block-number 17000000 --output Prover.toml
"""

import argparse
import sys
from typing import List, Optional

from storage_proof_toolkit.commands.helpers import (
    err_console,
    handle_command_error,
    report_block_not_found,
)
from storage_proof_toolkit.proofs.manager import StorageProofParams
from storage_proof_toolkit.proofs.params import (
    ParamsMode,
    assemble_parameters,
    format_parameters,
)
from storage_proof_toolkit.shared.constants import Settings
from storage_proof_toolkit.shared.exceptions import ProofParamsException
from storage_proof_toolkit.utils.formatters import (
    save_parameters_output,
    write_parameters,
)


def cmd_generate_params(
    mode: ParamsMode,
    settings: Settings,
    output: Optional[str] = None,
    generator: Optional[StorageProofParams] = None,
) -> List[str]:
    """Run the pipeline and send the parameter lines to the sink"""
    generator = generator or StorageProofParams.from_settings(settings)
    result = generator.generate(
        settings.block_number, settings.account, settings.slot
    )

    if not result.success:
        error = result.error
        if not error.is_fatal:
            report_block_not_found(error.message)
        handle_command_error(error.exception or RuntimeError(error.message))

    lines = format_parameters(assemble_parameters(mode, result.data))
    if output:
        path = save_parameters_output(lines, output)
        err_console.print(f"Parameters saved → {path}")
    else:
        write_parameters(lines)
    return lines


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storage-proof-params",
        description="Generate storage proof circuit parameters",
    )
    parser.add_argument(
        "command",
        nargs="?",
        help=" | ".join(m.value for m in ParamsMode),
    )
    parser.add_argument(
        "--block-number", type=str, help="Overrides BLOCK_NUMBER"
    )
    parser.add_argument("--account", type=str, help="Overrides TARGET_ACCOUNT")
    parser.add_argument("--slot", type=str, help="Overrides STORAGE_SLOT")
    parser.add_argument("--rpc-url", type=str, help="Overrides MAINNET_RPC")
    parser.add_argument(
        "--output", type=str, help="Output filename, stdout if omitted"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        mode = ParamsMode.from_command(args.command)
        settings = Settings.from_env(
            rpc_url=args.rpc_url,
            block_number=args.block_number,
            account=args.account,
            slot=args.slot,
        )
    except ProofParamsException as e:
        handle_command_error(e, lambda: parser.print_usage(sys.stderr))
        return

    cmd_generate_params(mode, settings, args.output)


if __name__ == "__main__":
    main()
