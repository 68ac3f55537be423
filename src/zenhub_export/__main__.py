from zenhub_export.cli import main

main()
