from winrt_pack.cli.main import main

main()
