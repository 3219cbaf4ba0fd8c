from linkedin_mcp.main import main

main()
