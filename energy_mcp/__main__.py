from energy_mcp.server import main

main()
