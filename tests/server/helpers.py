"""Sentence lines shared by server tests."""

GGA_LINE = "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
GSA_LINE = "$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39"
GSV_LINE = "$GPGSV,2,2,05,32,17,250,*4C"
RMC_LINE = "$GPRMC,225446.00,V,4916.45,N,12311.12,W,000.5,,191194,,,N*71"
VTG_LINE = "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"
BROKEN_LINE = "$GPGGA,bad,data*00"
