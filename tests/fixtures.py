"""Feed documents shared by the tests."""

AGENCY_LIST_SINGLE_XML = """
<body copyright="All data copyright agencies listed below and NextBus Inc 2024.">
<agency tag="sf-muni" title="San Francisco Muni" shortTitle="SF Muni" regionTitle="California-Northern"/>
</body>
"""

AGENCY_LIST_XML = """
<body copyright="All data copyright agencies listed below and NextBus Inc 2024.">
<agency tag="actransit" title="AC Transit" regionTitle="California-Northern"/>
<agency tag="sf-muni" title="San Francisco Muni" shortTitle="SF Muni" regionTitle="California-Northern"/>
</body>
"""

ROUTE_LIST_XML = """
<body copyright="All data copyright San Francisco Muni 2024.">
<route tag="N" title="N-Judah"/>
<route tag="KT" title="KT-Ingleside/Third Street"/>
</body>
"""

EMPTY_BODY_XML = '<body copyright="All data copyright NextBus Inc 2024."></body>'

ROUTE_CONFIG_XML = """
<body copyright="All data copyright San Francisco Muni 2024.">
<route tag="N" title="N-Judah" color="003399" oppositeColor="ffffff"
       latMin="37.7601" latMax="37.7932" lonMin="-122.5092" lonMax="-122.3875">
<stop tag="5240" title="Judah St &amp; 9th Ave" lat="37.7622" lon="-122.4662" stopId="15240"/>
<stop tag="5650" title="Judah St &amp; 19th Ave" lat="37.7614" lon="-122.4770" stopId="15650"/>
<stop tag="4448" title="Judah St &amp; La Playa St" lat="37.7601" lon="-122.5092" stopId="14448"/>
<direction tag="OB" title="Outbound to Ocean Beach" name="Outbound" useForUI="true">
  <stop tag="5240"/>
  <stop tag="5650"/>
</direction>
<direction tag="IB" title="Inbound to Caltrain" name="Inbound" useForUI="true">
  <stop tag="4448"/>
  <stop tag="5650"/>
  <stop tag="5240"/>
</direction>
<path>
  <point lat="37.7622" lon="-122.4662"/>
  <point lat="37.7614" lon="-122.4770"/>
</path>
<path>
  <point lat="37.7601" lon="-122.5092"/>
  <point lat="37.7614" lon="-122.4770"/>
</path>
</route>
</body>
"""

ROUTE_CONFIG_SINGLE_XML = """
<body>
<route tag="59" title="Powell-Mason Cable Car">
<stop tag="5059" title="Powell St &amp; Market St" lat="37.7847" lon="-122.4077"/>
<direction tag="OB" title="Outbound to Fisherman's Wharf" name="Outbound" useForUI="true">
  <stop tag="5059"/>
</direction>
<path>
  <point lat="37.7847" lon="-122.4077"/>
</path>
</route>
</body>
"""

ROUTE_CONFIG_DANGLING_REF_XML = """
<body>
<route tag="N" title="N-Judah">
<stop tag="5240" title="Judah St &amp; 9th Ave" lat="37.7622" lon="-122.4662"/>
<direction tag="OB" title="Outbound to Ocean Beach" name="Outbound" useForUI="true">
  <stop tag="5240"/>
  <stop tag="9999"/>
</direction>
</route>
</body>
"""

PREDICTIONS_XML = """
<body copyright="All data copyright San Francisco Muni 2024.">
<predictions agencyTitle="San Francisco Muni" routeTitle="N-Judah" routeTag="N"
             stopTitle="Judah St &amp; 19th Ave" stopTag="5650">
  <direction title="Outbound to Ocean Beach">
    <prediction epochTime="1700000180000" seconds="185" minutes="3" isDeparture="false"
                affectedByLayover="true" dirTag="OB" vehicle="1520" block="9701" tripTag="1001"/>
    <prediction epochTime="1700000720000" seconds="725" minutes="12" isDeparture="false"
                dirTag="OB" vehicle="1534" block="9703" tripTag="1003"/>
  </direction>
  <direction title="Inbound to Caltrain">
    <prediction epochTime="1700000420000" seconds="421" minutes="7" isDeparture="false"
                dirTag="IB" vehicle="1511" block="9702" tripTag="2002" delayed="true"/>
  </direction>
  <message text="No service past 1am" priority="Normal"/>
</predictions>
</body>
"""

PREDICTIONS_SINGLE_XML = """
<body>
<predictions agencyTitle="San Francisco Muni" routeTitle="N-Judah" routeTag="N"
             stopTitle="Judah St &amp; 9th Ave" stopTag="5240">
  <direction title="Inbound to Caltrain">
    <prediction epochTime="1700000060000" seconds="61" minutes="1" isDeparture="true"
                dirTag="IB" vehicle="1511" tripTag="2002" isScheduleBased="true"/>
  </direction>
</predictions>
</body>
"""

PREDICTIONS_NONE_XML = """
<body>
<predictions agencyTitle="San Francisco Muni" routeTitle="N-Judah" routeTag="N"
             stopTitle="Judah St &amp; 9th Ave" stopTag="5240"
             dirTitleBecauseNoPredictions="Outbound to Ocean Beach">
  <message text="No service past 1am" priority="Normal"/>
</predictions>
</body>
"""

VEHICLE_LOCATIONS_XML = """
<body>
<vehicle id="1520" routeTag="N" dirTag="OB" lat="37.7614" lon="-122.477"
         secsSinceReport="12" predictable="true" heading="268" speedKmHr="24"/>
<vehicle id="1534" routeTag="N" lat="37.7701" lon="-122.4451"
         secsSinceReport="95" predictable="false" heading="-1"/>
<lastTime time="1700000000000"/>
</body>
"""

ERROR_XML = """
<body copyright="All data copyright agencies listed below and NextBus Inc 2024.">
<Error shouldRetry="false">
  Agency parameter "a=nowhere" is not valid.
</Error>
</body>
"""
