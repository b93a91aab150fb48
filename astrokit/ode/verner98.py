"""Verner order 9(8) "robust" Runge-Kutta pair with interpolant."""

from __future__ import annotations

import numpy as np

from astrokit.ode.adaptive import RKAdaptive


def _lower_triangular(rows, n: int) -> np.ndarray:
    """Square matrix whose rows start with the given values, zero-padded."""
    out = np.zeros((n, n))
    for i, row in enumerate(rows):
        out[i, : len(row)] = row
    return out


_N = 21
_NI = 8

_BI = [
    [
        1.0,
        -12.7496654177157608955895,
        68.5308076667232199952196,
        -194.811974535418414689047,
        317.842637135285826843756,
        -299.715540959339648452442,
        152.111918642041217708538,
        -32.1935705547180575081256,
    ],
    [0.0] * _NI,
    [0.0] * _NI,
    [0.0] * _NI,
    [0.0] * _NI,
    [0.0] * _NI,
    [0.0] * _NI,
    [
        0.0,
        141.069609253371254453668,
        -1283.76845064659369199944,
        4630.28006176668077387149,
        -8648.50097610031662043184,
        8890.81216106701867829543,
        -4787.94921267693825939205,
        1057.66528615054380679794,
    ],
    [
        0.0,
        -51.7510132345153834876328,
        486.041250731293132503197,
        -1777.47558636852386371174,
        3345.49823864979134668829,
        -3455.76248000736632093322,
        1867.08116129031145646877,
        -413.400477810961774594034,
    ],
    [
        0.0,
        16.3208200869589639125934,
        -118.7072740966746664526,
        379.89806532946562356301,
        -659.198017968181602554978,
        645.012709496887055138359,
        -335.392363029477962754754,
        72.1935368580219005707477,
    ],
    [
        0.0,
        -5.89778792751273783778743,
        89.6142715660228077467764,
        -381.388787705276683936972,
        773.096419986775003962975,
        -834.121253628326257967274,
        463.620915193360019657121,
        -104.699134067421724125779,
    ],
    [
        0.0,
        -211.575357829394278041946,
        1922.14974720795657958661,
        -6927.54464706340331758838,
        12933.891311491837768699,
        -13292.722522361093069776,
        7157.20059158866570214741,
        -1580.83068776559525758785,
    ],
    [
        0.0,
        -29.6431515497338651243808,
        265.616145266880266717635,
        -951.314637915278467517055,
        1769.87662795410824401188,
        -1814.92615873224167444278,
        975.725237951851340767462,
        -215.275804260013813973273,
    ],
    [
        0.0,
        -78.7189082222032254776423,
        702.203096369808577037475,
        -2509.78361852779153196025,
        4663.88468740335338225123,
        -4779.04976353383517562179,
        2567.96936037573641442577,
        -566.368422124720837018685,
    ],
    [
        0.0,
        -20.1928156668043818910974,
        179.363725794911857747138,
        -639.812626073269029802759,
        1187.62303559744009362475,
        -1216.08314647891097592947,
        653.130516603491173555085,
        -143.998119637028054285111,
    ],
    [0.0] * _NI,
    [
        0.0,
        22.2552917293700431855541,
        -202.276888265656396015402,
        741.450403595939064871345,
        -1420.17137581964652781608,
        1506.82675928390972330817,
        -842.088314540574629063485,
        194.004124016658664686474,
    ],
    [
        0.0,
        14.8776398736050623483607,
        -312.284051278534661832964,
        1842.5066172161532449536,
        -4868.89964886307916458463,
        6508.34668820326805871446,
        -4307.8664815308693505358,
        1123.31923637945669725013,
    ],
    [
        0.0,
        94.9845665052537810879585,
        -820.577565429543483332964,
        2818.34725689864899322856,
        -4992.6497251575228801812,
        4835.80464743580523645505,
        -2434.06871887744409832521,
        498.159538624802166850714,
    ],
    [
        0.0,
        63.4608259614603227305452,
        -387.624469578244827516755,
        652.600872703938080121588,
        222.002097600079963513053,
        -1696.55536334518637886504,
        1674.05833519684279053763,
        -527.942298538889986048162,
    ],
    [
        0.0,
        57.5599464378601837211136,
        -588.280345308348955768452,
        2317.04860067813478963217,
        -4624.29531190992656775052,
        5002.13326355940989742521,
        -2803.53294618699555940111,
        639.366792729866460831545,
    ],
]

_C = [
    0.0,
    0.0346199999999999979971577,
    0.0970243506387804405255437,
    0.145536525958170681604997,
    0.561000000000000054178884,
    0.229007911590485002673034,
    0.544992088409514963132096,
    0.645000000000000017763568,
    0.483750000000000013322676,
    0.0675700000000000050581761,
    0.25,
    0.659065061873099877765014,
    0.820599999999999996092015,
    0.901200000000000001065814,
    1.0,
    1.0,
    1.0,
    0.740418547063156129439676,
    0.888000000000000011546319,
    0.695999999999999952038365,
    0.486999999999999988453681,
]

_B = [
    0.0146119768584231524838346,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
    -0.391521186233133922094396,
    0.231093250028950647489978,
    0.127476676999285248870208,
    0.224643417620415786206678,
    0.568435268974851304335516,
    0.058258715572158274731418,
    0.136431740348221558489783,
    0.0305701398308279755078321,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
]

_BHAT = [
    0.0199699651488677298871721,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
    2.19149930494933009583747,
    0.0885707184820843790307165,
    0.114056023486596561089534,
    0.253316380534510721123098,
    -2.05656438624094084488547,
    0.340809679901312001515379,
    0.0,
    0.0,
    0.0483423137382395853856032,
    0.0,
    0.0,
    0.0,
    0.0,
    0.0,
]

_A = _lower_triangular(
    [
        [],
        [0.0346199999999999979971577],
        [-0.0389335438857287344238678, 0.135957894524509181888305],
        [0.0363841314895426704012493, 0.0, 0.10915239446862799732596],
        [
            2.02576391439396985560961,
            0.0,
            -7.63802383649629224038335,
            6.17325992210232232793032,
        ],
        [
            0.0511227558940606091608672,
            0.0,
            0.0,
            0.177082379455502147980184,
            0.000802776240922250194052834,
        ],
        [
            0.131600635797521625658391,
            0.0,
            0.0,
            -0.295727625266963667360898,
            0.0878137803564295188474276,
            0.621305297522527499864964,
        ],
        [
            0.0716666666666666701823729,
            0.0,
            0.0,
            0.0,
            0.0,
            0.330553357891531951473496,
            0.242779975441801382229912,
        ],
        [
            0.071806640625000001110223,
            0.0,
            0.0,
            0.0,
            0.0,
            0.329438028322817710868975,
            0.116519002927182285800356,
            -0.0340136718749999983346655,
        ],
        [
            0.0483675764634064683789028,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0392898992567616428539523,
            0.105474094589034464442001,
            -0.0214386528464831256635126,
            -0.104122917462719441483721,
        ],
        [
            -0.0266456148720147847908102,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0333333333333333328707404,
            -0.163107224487246710298294,
            0.03396081684127761485259,
            0.157231941381462597684404,
            0.215226747803187956620263,
        ],
        [
            0.0368900924870862248483583,
            0.0,
            0.0,
            0.0,
            0.0,
            -0.146518157672554300008372,
            0.224257776817202436614451,
            0.0229440571706607254753862,
            -0.0035850052905728761395987,
            0.0866922331644438548536868,
            0.43838406519683376094676,
        ],
        [
            -0.486601221511334058877907,
            0.0,
            0.0,
            0.0,
            0.0,
            -6.30460265028285338217984,
            -0.281245618289472587569833,
            -2.67901923621984927592621,
            0.518815663924157566277984,
            1.36535318760334178911364,
            5.8850910885039464659485,
            2.80280878627206275766071,
        ],
        [
            0.418536745775347163167623,
            0.0,
            0.0,
            0.0,
            0.0,
            6.72454758190645929261109,
            -0.425444280164611776662298,
            3.34327915300126576880757,
            0.617081663117537759788434,
            -0.929966123939932831632404,
            -6.09994880475101108885383,
            -3.00220618788939885845934,
            0.255320252944344572298974,
        ],
        [
            -0.779374086122884612848338,
            0.0,
            0.0,
            0.0,
            0.0,
            -13.9373425381077762352788,
            1.2520488533793572294428,
            -14.6915004080168696276587,
            -0.494705058533141672771904,
            2.24297490914623676161455,
            13.367893803828643228826,
            14.3966504866506870286003,
            -0.797581333177679985269037,
            0.440935370953427774320943,
        ],
        [
            2.05805133746688628804122,
            0.0,
            0.0,
            0.0,
            0.0,
            22.357937727968032248782,
            0.909498109975563351348171,
            35.8911009824026407954989,
            -3.44251502762445360517063,
            -4.86548135803636849772147,
            -18.9098038135434265427648,
            -34.2635444803045174921863,
            1.26475652169564267701674,
        ],
        _B[:15],
        [
            0.015499736681895593878866,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.335515321905963503912318,
            0.200361394419186072957118,
            0.12520606592835492598681,
            0.229867639318420663441245,
            -0.202025065347618132394203,
            0.0591710323066545682002548,
            -0.0265183478304763867172689,
            -0.0238409460213097126879411,
            0.0,
            0.0271817157020850172499671,
        ],
        [
            0.0130245394311433830558666,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            -0.745285090241311176662009,
            0.264386789642930108978902,
            0.131396175837275391851122,
            0.216725381512292730734615,
            0.87341175640760526643902,
            0.0118590564393577669460855,
            0.0587600294168955095130968,
            0.00326651863020208793608745,
            0.0,
            -0.00895930864841792962138811,
            0.0694141515720269192124547,
        ],
        [
            0.0139708999692594263569712,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            -0.466576533595767450890435,
            0.241637278721625714528187,
            0.129036334134567470810495,
            0.221670067173510537683612,
            0.625727512336464508635459,
            0.0435531241567928412150579,
            0.101196249166729076995885,
            0.0180858225467972096034419,
            0.0,
            -0.0207987558768916967755214,
            -0.0902223251708621915012642,
            -0.121279673562225423499861,
        ],
        [
            0.0160463888831811271606931,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0,
            0.0951771239945833624762628,
            0.135918726465531769509454,
            0.12377652809598539696001,
            0.233565626410296600656835,
            -0.0905150817262587309430799,
            -0.0253757427000613107470617,
            -0.135963169688716217775593,
            -0.0467921428414511328397474,
            0.0,
            0.0517795885939174790890682,
            0.0967259567747677379001559,
            0.14773126903407426957493,
            -0.115075071295850386854376,
        ],
    ],
    _N,
)


class RKV98(RKAdaptive):
    """Verner 9(8) adaptive integrator with dense output."""

    ORDER = 9
    FSAL = False
    B = _B
    C = _C
    A = _A
    BI = _BI
    BERR = np.asarray(_B) - np.asarray(_BHAT)