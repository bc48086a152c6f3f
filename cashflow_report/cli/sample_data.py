"""
Feed de ejemplo que usa el CLI cuando no se le pasa un archivo.

Incluye los dos fines de semana (AED viernes/sábado, SGP sábado/domingo),
una entidad con dos compras (test2) y dos operaciones opuestas que caen el
mismo día ajustado (test y test2 el 04 Jan 2016).
"""

SAMPLE_FEED = "\n".join(
    [
        "foo,B,0.50,SGP,01 Jan 2016,02 Jan 2016,200,100.25",
        "bar,S,0.22,AED,05 Jan 2016,07 Jan 2016,450,150.5",
        "covfefe,S,0.26,AED,05 Mar 2016,07 Mar 2016,450,150.5",
        "test2,B,0.7,AED,05 Oct 2016,07 Oct 2016,100,120.5",
        "test,S,0.1,SGP,01 Jan 2016,02 Jan 2016,10,10",
        "test2,B,0.25,SGP,01 Jan 2016,02 Jan 2016,100,10",
    ]
)
