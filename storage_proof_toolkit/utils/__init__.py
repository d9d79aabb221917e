from storage_proof_toolkit.utils.formatters import (
    save_parameters_output,
    write_parameters,
)

__all__ = ["write_parameters", "save_parameters_output"]
