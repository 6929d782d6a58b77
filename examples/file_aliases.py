from __future__ import annotations

import sys

import scriptalias
from scriptalias import AliasDescriptor, GenericParameter, ObsoleteInfo, Parameter, TypeRef

CONTEXT = Parameter("context", TypeRef(name="ICakeContext", namespace="Cake.Core"))
FILE_ALIASES = TypeRef(name="FileAliases", namespace="Cake.Common.IO")
FILE_PATH = TypeRef(name="FilePath", namespace="Cake.Core.IO")


def main() -> None:
    aliases = [
        AliasDescriptor(
            name="CopyFile",
            return_type=TypeRef.VOID,
            declaring_type=FILE_ALIASES,
            parameters=(CONTEXT, Parameter("filePath", FILE_PATH), Parameter("targetFilePath", FILE_PATH)),
            documentation="/// <summary>Copies an existing file to a new location.</summary>",
        ),
        # Deprecated alias: logs a warning, then forwards with the obsolete diagnostic suppressed.
        AliasDescriptor(
            name="ReadJson",
            return_type=TypeRef(name="T", is_generic_parameter=True),
            declaring_type=FILE_ALIASES,
            generic_parameters=(GenericParameter("T", constraints=("class",)),),
            parameters=(CONTEXT, Parameter("path", FILE_PATH)),
            obsolete=ObsoleteInfo(message="Use DeserializeJsonFromFile instead."),
        ),
    ]
    sys.stdout.write(scriptalias.render_aliases(aliases) + "\n")


if __name__ == "__main__":
    main()
