from ratingcharts.main import main

main()
