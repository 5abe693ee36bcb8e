# Note: absolute import from "ugidmap"; PyInstaller binaries do not work without this.
from ugidmap.archiver import main

main()
