from .adapters.inbound.cli import main

main()
