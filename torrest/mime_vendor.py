"""Extension to MIME type table for vendor ``application/vnd.*`` types."""

from __future__ import annotations

# Ordered as registered; when an extension appears more than once, the first
# entry is the one that counts.
_ENTRIES: tuple[tuple[str, str], ...] = (
    (".plb", "application/vnd.3gpp.pic-bw-large"),
    (".psb", "application/vnd.3gpp.pic-bw-small"),
    (".pvb", "application/vnd.3gpp.pic-bw-var"),
    (".tcap", "application/vnd.3gpp2.tcap"),
    (".pwn", "application/vnd.3m.post-it-notes"),
    (".aso", "application/vnd.accpac.simply.aso"),
    (".imp", "application/vnd.accpac.simply.imp"),
    (".acu", "application/vnd.acucobol"),
    (".atc", "application/vnd.acucorp"),
    (".acutc", "application/vnd.acucorp"),
    (".air", "application/vnd.adobe.air-application-installer-package+zip"),
    (".fcdt", "application/vnd.adobe.formscentral.fcdt"),
    (".fxp", "application/vnd.adobe.fxp"),
    (".fxpl", "application/vnd.adobe.fxp"),
    (".xdp", "application/vnd.adobe.xdp+xml"),
    (".xfdf", "application/vnd.adobe.xfdf"),
    (".ahead", "application/vnd.ahead.space"),
    (".azf", "application/vnd.airzip.filesecure.azf"),
    (".azs", "application/vnd.airzip.filesecure.azs"),
    (".azw", "application/vnd.amazon.ebook"),
    (".acc", "application/vnd.americandynamics.acc"),
    (".ami", "application/vnd.amiga.ami"),
    (".apk", "application/vnd.android.package-archive"),
    (".cii", "application/vnd.anser-web-certificate-issue-initiation"),
    (".fti", "application/vnd.anser-web-funds-transfer-initiation"),
    (".atx", "application/vnd.antix.game-component"),
    (".mpkg", "application/vnd.apple.installer+xml"),
    (".m3u8", "application/vnd.apple.mpegurl"),
    (".swi", "application/vnd.aristanetworks.swi"),
    (".iota", "application/vnd.astraea-software.iota"),
    (".aep", "application/vnd.audiograph"),
    (".mpm", "application/vnd.blueice.multipass"),
    (".bmi", "application/vnd.bmi"),
    (".rep", "application/vnd.businessobjects"),
    (".cdxml", "application/vnd.chemdraw+xml"),
    (".mmd", "application/vnd.chipnuts.karaoke-mmd"),
    (".cdy", "application/vnd.cinderella"),
    (".cla", "application/vnd.claymore"),
    (".rp9", "application/vnd.cloanto.rp9"),
    (".c4g", "application/vnd.clonk.c4group"),
    (".c4d", "application/vnd.clonk.c4group"),
    (".c4f", "application/vnd.clonk.c4group"),
    (".c4p", "application/vnd.clonk.c4group"),
    (".c4u", "application/vnd.clonk.c4group"),
    (".c11amc", "application/vnd.cluetrust.cartomobile-config"),
    (".c11amz", "application/vnd.cluetrust.cartomobile-config-pkg"),
    (".csp", "application/vnd.commonspace"),
    (".cdbcmsg", "application/vnd.contact.cmsg"),
    (".cmc", "application/vnd.cosmocaller"),
    (".clkx", "application/vnd.crick.clicker"),
    (".clkk", "application/vnd.crick.clicker.keyboard"),
    (".clkp", "application/vnd.crick.clicker.palette"),
    (".clkt", "application/vnd.crick.clicker.template"),
    (".clkw", "application/vnd.crick.clicker.wordbank"),
    (".wbs", "application/vnd.criticaltools.wbs+xml"),
    (".pml", "application/vnd.ctc-posml"),
    (".ppd", "application/vnd.cups-ppd"),
    (".car", "application/vnd.curl.car"),
    (".pcurl", "application/vnd.curl.pcurl"),
    (".dart", "application/vnd.dart"),
    (".rdz", "application/vnd.data-vision.rdz"),
    (".uvf", "application/vnd.dece.data"),
    (".uvvf", "application/vnd.dece.data"),
    (".uvd", "application/vnd.dece.data"),
    (".uvvd", "application/vnd.dece.data"),
    (".uvt", "application/vnd.dece.ttml+xml"),
    (".uvvt", "application/vnd.dece.ttml+xml"),
    (".uvx", "application/vnd.dece.unspecified"),
    (".uvvx", "application/vnd.dece.unspecified"),
    (".uvz", "application/vnd.dece.zip"),
    (".uvvz", "application/vnd.dece.zip"),
    (".fe_launch", "application/vnd.denovo.fcselayout-link"),
    (".dna", "application/vnd.dna"),
    (".mlp", "application/vnd.dolby.mlp"),
    (".dpg", "application/vnd.dpgraph"),
    (".dfac", "application/vnd.dreamfactory"),
    (".kpxx", "application/vnd.ds-keypoint"),
    (".ait", "application/vnd.dvb.ait"),
    (".svc", "application/vnd.dvb.service"),
    (".geo", "application/vnd.dynageo"),
    (".mag", "application/vnd.ecowin.chart"),
    (".nml", "application/vnd.enliven"),
    (".esf", "application/vnd.epson.esf"),
    (".msf", "application/vnd.epson.msf"),
    (".qam", "application/vnd.epson.quickanime"),
    (".slt", "application/vnd.epson.salt"),
    (".ssf", "application/vnd.epson.ssf"),
    (".es3", "application/vnd.eszigno3+xml"),
    (".et3", "application/vnd.eszigno3+xml"),
    (".ez2", "application/vnd.ezpix-album"),
    (".ez3", "application/vnd.ezpix-package"),
    (".fdf", "application/vnd.fdf"),
    (".mseed", "application/vnd.fdsn.mseed"),
    (".seed", "application/vnd.fdsn.seed"),
    (".dataless", "application/vnd.fdsn.seed"),
    (".gph", "application/vnd.flographit"),
    (".ftc", "application/vnd.fluxtime.clip"),
    (".fm", "application/vnd.framemaker"),
    (".frame", "application/vnd.framemaker"),
    (".maker", "application/vnd.framemaker"),
    (".book", "application/vnd.framemaker"),
    (".fnc", "application/vnd.frogans.fnc"),
    (".ltf", "application/vnd.frogans.ltf"),
    (".fsc", "application/vnd.fsc.weblaunch"),
    (".oas", "application/vnd.fujitsu.oasys"),
    (".oa2", "application/vnd.fujitsu.oasys2"),
    (".oa3", "application/vnd.fujitsu.oasys3"),
    (".fg5", "application/vnd.fujitsu.oasysgp"),
    (".bh2", "application/vnd.fujitsu.oasysprs"),
    (".ddd", "application/vnd.fujixerox.ddd"),
    (".xdw", "application/vnd.fujixerox.docuworks"),
    (".xbd", "application/vnd.fujixerox.docuworks.binder"),
    (".fzs", "application/vnd.fuzzysheet"),
    (".txd", "application/vnd.genomatix.tuxedo"),
    (".ggb", "application/vnd.geogebra.file"),
    (".ggt", "application/vnd.geogebra.tool"),
    (".gex", "application/vnd.geometry-explorer"),
    (".gre", "application/vnd.geometry-explorer"),
    (".gxt", "application/vnd.geonext"),
    (".g2w", "application/vnd.geoplan"),
    (".g3w", "application/vnd.geospace"),
    (".gmx", "application/vnd.gmx"),
    (".kml", "application/vnd.google-earth.kml+xml"),
    (".kmz", "application/vnd.google-earth.kmz"),
    (".gqf", "application/vnd.grafeq"),
    (".gqs", "application/vnd.grafeq"),
    (".gac", "application/vnd.groove-account"),
    (".ghf", "application/vnd.groove-help"),
    (".gim", "application/vnd.groove-identity-message"),
    (".grv", "application/vnd.groove-injector"),
    (".gtm", "application/vnd.groove-tool-message"),
    (".tpl", "application/vnd.groove-tool-template"),
    (".vcg", "application/vnd.groove-vcard"),
    (".hal", "application/vnd.hal+xml"),
    (".zmm", "application/vnd.handheld-entertainment+xml"),
    (".hbci", "application/vnd.hbci"),
    (".les", "application/vnd.hhe.lesson-player"),
    (".hpgl", "application/vnd.hp-hpgl"),
    (".hpid", "application/vnd.hp-hpid"),
    (".hps", "application/vnd.hp-hps"),
    (".jlt", "application/vnd.hp-jlyt"),
    (".pcl", "application/vnd.hp-pcl"),
    (".pclxl", "application/vnd.hp-pclxl"),
    (".sfd-hdstx", "application/vnd.hydrostatix.sof-data"),
    (".mpy", "application/vnd.ibm.minipay"),
    (".afp", "application/vnd.ibm.modcap"),
    (".listafp", "application/vnd.ibm.modcap"),
    (".list3820", "application/vnd.ibm.modcap"),
    (".irm", "application/vnd.ibm.rights-management"),
    (".sc", "application/vnd.ibm.secure-container"),
    (".icc", "application/vnd.iccprofile"),
    (".icm", "application/vnd.iccprofile"),
    (".igl", "application/vnd.igloader"),
    (".ivp", "application/vnd.immervision-ivp"),
    (".ivu", "application/vnd.immervision-ivu"),
    (".igm", "application/vnd.insors.igm"),
    (".xpw", "application/vnd.intercon.formnet"),
    (".xpx", "application/vnd.intercon.formnet"),
    (".i2g", "application/vnd.intergeo"),
    (".qbo", "application/vnd.intu.qbo"),
    (".qfx", "application/vnd.intu.qfx"),
    (".rcprofile", "application/vnd.ipunplugged.rcprofile"),
    (".irp", "application/vnd.irepository.package+xml"),
    (".xpr", "application/vnd.is-xpr"),
    (".fcs", "application/vnd.isac.fcs"),
    (".jam", "application/vnd.jam"),
    (".rms", "application/vnd.jcp.javame.midlet-rms"),
    (".jisp", "application/vnd.jisp"),
    (".joda", "application/vnd.joost.joda-archive"),
    (".ktz", "application/vnd.kahootz"),
    (".ktr", "application/vnd.kahootz"),
    (".karbon", "application/vnd.kde.karbon"),
    (".chrt", "application/vnd.kde.kchart"),
    (".kfo", "application/vnd.kde.kformula"),
    (".flw", "application/vnd.kde.kivio"),
    (".kon", "application/vnd.kde.kontour"),
    (".kpr", "application/vnd.kde.kpresenter"),
    (".kpt", "application/vnd.kde.kpresenter"),
    (".ksp", "application/vnd.kde.kspread"),
    (".kwd", "application/vnd.kde.kword"),
    (".kwt", "application/vnd.kde.kword"),
    (".htke", "application/vnd.kenameaapp"),
    (".kia", "application/vnd.kidspiration"),
    (".kne", "application/vnd.kinar"),
    (".knp", "application/vnd.kinar"),
    (".skp", "application/vnd.koan"),
    (".skd", "application/vnd.koan"),
    (".skt", "application/vnd.koan"),
    (".skm", "application/vnd.koan"),
    (".sse", "application/vnd.kodak-descriptor"),
    (".lasxml", "application/vnd.las.las+xml"),
    (".lbd", "application/vnd.llamagraphics.life-balance.desktop"),
    (".lbe", "application/vnd.llamagraphics.life-balance.exchange+xml"),
    (".123", "application/vnd.lotus-1-2-3"),
    (".apr", "application/vnd.lotus-approach"),
    (".pre", "application/vnd.lotus-freelance"),
    (".nsf", "application/vnd.lotus-notes"),
    (".org", "application/vnd.lotus-organizer"),
    (".scm", "application/vnd.lotus-screencam"),
    (".lwp", "application/vnd.lotus-wordpro"),
    (".portpkg", "application/vnd.macports.portpkg"),
    (".mcd", "application/vnd.mcd"),
    (".mc1", "application/vnd.medcalcdata"),
    (".cdkey", "application/vnd.mediastation.cdkey"),
    (".mwf", "application/vnd.mfer"),
    (".mfm", "application/vnd.mfmp"),
    (".flo", "application/vnd.micrografx.flo"),
    (".igx", "application/vnd.micrografx.igx"),
    (".mif", "application/vnd.mif"),
    (".daf", "application/vnd.mobius.daf"),
    (".dis", "application/vnd.mobius.dis"),
    (".mbk", "application/vnd.mobius.mbk"),
    (".mqy", "application/vnd.mobius.mqy"),
    (".msl", "application/vnd.mobius.msl"),
    (".plc", "application/vnd.mobius.plc"),
    (".txf", "application/vnd.mobius.txf"),
    (".mpn", "application/vnd.mophun.application"),
    (".mpc", "application/vnd.mophun.certificate"),
    (".xul", "application/vnd.mozilla.xul+xml"),
    (".cil", "application/vnd.ms-artgalry"),
    (".cab", "application/vnd.ms-cab-compressed"),
    (".xls", "application/vnd.ms-excel"),
    (".xlm", "application/vnd.ms-excel"),
    (".xla", "application/vnd.ms-excel"),
    (".xlc", "application/vnd.ms-excel"),
    (".xlt", "application/vnd.ms-excel"),
    (".xlw", "application/vnd.ms-excel"),
    (".xlam", "application/vnd.ms-excel.addin.macroenabled.12"),
    (".xlsb", "application/vnd.ms-excel.sheet.binary.macroenabled.12"),
    (".xlsm", "application/vnd.ms-excel.sheet.macroenabled.12"),
    (".xltm", "application/vnd.ms-excel.template.macroenabled.12"),
    (".eot", "application/vnd.ms-fontobject"),
    (".chm", "application/vnd.ms-htmlhelp"),
    (".ims", "application/vnd.ms-ims"),
    (".lrm", "application/vnd.ms-lrm"),
    (".thmx", "application/vnd.ms-officetheme"),
    (".cat", "application/vnd.ms-pki.seccat"),
    (".stl", "application/vnd.ms-pki.stl"),
    (".ppt", "application/vnd.ms-powerpoint"),
    (".pps", "application/vnd.ms-powerpoint"),
    (".pot", "application/vnd.ms-powerpoint"),
    (".ppam", "application/vnd.ms-powerpoint.addin.macroenabled.12"),
    (".pptm", "application/vnd.ms-powerpoint.presentation.macroenabled.12"),
    (".sldm", "application/vnd.ms-powerpoint.slide.macroenabled.12"),
    (".ppsm", "application/vnd.ms-powerpoint.slideshow.macroenabled.12"),
    (".potm", "application/vnd.ms-powerpoint.template.macroenabled.12"),
    (".mpp", "application/vnd.ms-project"),
    (".mpt", "application/vnd.ms-project"),
    (".docm", "application/vnd.ms-word.document.macroenabled.12"),
    (".dotm", "application/vnd.ms-word.template.macroenabled.12"),
    (".wps", "application/vnd.ms-works"),
    (".wks", "application/vnd.ms-works"),
    (".wcm", "application/vnd.ms-works"),
    (".wdb", "application/vnd.ms-works"),
    (".wpl", "application/vnd.ms-wpl"),
    (".xps", "application/vnd.ms-xpsdocument"),
    (".mseq", "application/vnd.mseq"),
    (".mus", "application/vnd.musician"),
    (".msty", "application/vnd.muvee.style"),
    (".taglet", "application/vnd.mynfc"),
    (".nlu", "application/vnd.neurolanguage.nlu"),
    (".ntf", "application/vnd.nitf"),
    (".nitf", "application/vnd.nitf"),
    (".nnd", "application/vnd.noblenet-directory"),
    (".nns", "application/vnd.noblenet-sealer"),
    (".nnw", "application/vnd.noblenet-web"),
    (".ngdat", "application/vnd.nokia.n-gage.data"),
    (".n-gage", "application/vnd.nokia.n-gage.symbian.install"),
    (".rpst", "application/vnd.nokia.radio-preset"),
    (".rpss", "application/vnd.nokia.radio-presets"),
    (".edm", "application/vnd.novadigm.edm"),
    (".edx", "application/vnd.novadigm.edx"),
    (".ext", "application/vnd.novadigm.ext"),
    (".odc", "application/vnd.oasis.opendocument.chart"),
    (".otc", "application/vnd.oasis.opendocument.chart-template"),
    (".odb", "application/vnd.oasis.opendocument.database"),
    (".odf", "application/vnd.oasis.opendocument.formula"),
    (".odft", "application/vnd.oasis.opendocument.formula-template"),
    (".odg", "application/vnd.oasis.opendocument.graphics"),
    (".otg", "application/vnd.oasis.opendocument.graphics-template"),
    (".odi", "application/vnd.oasis.opendocument.image"),
    (".oti", "application/vnd.oasis.opendocument.image-template"),
    (".odp", "application/vnd.oasis.opendocument.presentation"),
    (".otp", "application/vnd.oasis.opendocument.presentation-template"),
    (".ods", "application/vnd.oasis.opendocument.spreadsheet"),
    (".ots", "application/vnd.oasis.opendocument.spreadsheet-template"),
    (".odt", "application/vnd.oasis.opendocument.text"),
    (".odm", "application/vnd.oasis.opendocument.text-master"),
    (".ott", "application/vnd.oasis.opendocument.text-template"),
    (".oth", "application/vnd.oasis.opendocument.text-web"),
    (".xo", "application/vnd.olpc-sugar"),
    (".dd2", "application/vnd.oma.dd2+xml"),
    (".oxt", "application/vnd.openofficeorg.extension"),
    (".pptx", "application/vnd.openxmlformats-officedocument.presentationml.presentation"),
    (".sldx", "application/vnd.openxmlformats-officedocument.presentationml.slide"),
    (".ppsx", "application/vnd.openxmlformats-officedocument.presentationml.slideshow"),
    (".potx", "application/vnd.openxmlformats-officedocument.presentationml.template"),
    (".xlsx", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
    (".xltx", "application/vnd.openxmlformats-officedocument.spreadsheetml.template"),
    (".docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
    (".dotx", "application/vnd.openxmlformats-officedocument.wordprocessingml.template"),
    (".mgp", "application/vnd.osgeo.mapguide.package"),
    (".dp", "application/vnd.osgi.dp"),
    (".esa", "application/vnd.osgi.subsystem"),
    (".pdb", "application/vnd.palm"),
    (".pqa", "application/vnd.palm"),
    (".oprc", "application/vnd.palm"),
    (".paw", "application/vnd.pawaafile"),
    (".str", "application/vnd.pg.format"),
    (".ei6", "application/vnd.pg.osasli"),
    (".efif", "application/vnd.picsel"),
    (".wg", "application/vnd.pmi.widget"),
    (".plf", "application/vnd.pocketlearn"),
    (".pbd", "application/vnd.powerbuilder6"),
    (".box", "application/vnd.previewsystems.box"),
    (".mgz", "application/vnd.proteus.magazine"),
    (".qps", "application/vnd.publishare-delta-tree"),
    (".ptid", "application/vnd.pvi.ptid1"),
    (".qxd", "application/vnd.quark.quarkxpress"),
    (".qxt", "application/vnd.quark.quarkxpress"),
    (".qwd", "application/vnd.quark.quarkxpress"),
    (".qwt", "application/vnd.quark.quarkxpress"),
    (".qxl", "application/vnd.quark.quarkxpress"),
    (".qxb", "application/vnd.quark.quarkxpress"),
    (".bed", "application/vnd.realvnc.bed"),
    (".mxl", "application/vnd.recordare.musicxml"),
    (".musicxml", "application/vnd.recordare.musicxml+xml"),
    (".cryptonote", "application/vnd.rig.cryptonote"),
    (".cod", "application/vnd.rim.cod"),
    (".rm", "application/vnd.rn-realmedia"),
    (".rmvb", "application/vnd.rn-realmedia-vbr"),
    (".link66", "application/vnd.route66.link66+xml"),
    (".st", "application/vnd.sailingtracker.track"),
    (".see", "application/vnd.seemail"),
    (".sema", "application/vnd.sema"),
    (".semd", "application/vnd.semd"),
    (".semf", "application/vnd.semf"),
    (".ifm", "application/vnd.shana.informed.formdata"),
    (".itp", "application/vnd.shana.informed.formtemplate"),
    (".iif", "application/vnd.shana.informed.interchange"),
    (".ipk", "application/vnd.shana.informed.package"),
    (".twd", "application/vnd.simtech-mindmapper"),
    (".twds", "application/vnd.simtech-mindmapper"),
    (".mmf", "application/vnd.smaf"),
    (".teacher", "application/vnd.smart.teacher"),
    (".sdkm", "application/vnd.solent.sdkm+xml"),
    (".sdkd", "application/vnd.solent.sdkm+xml"),
    (".dxp", "application/vnd.spotfire.dxp"),
    (".sfs", "application/vnd.spotfire.sfs"),
    (".sdc", "application/vnd.stardivision.calc"),
    (".sda", "application/vnd.stardivision.draw"),
    (".sdd", "application/vnd.stardivision.impress"),
    (".smf", "application/vnd.stardivision.math"),
    (".sdw", "application/vnd.stardivision.writer"),
    (".vor", "application/vnd.stardivision.writer"),
    (".sgl", "application/vnd.stardivision.writer-global"),
    (".smzip", "application/vnd.stepmania.package"),
    (".sm", "application/vnd.stepmania.stepchart"),
    (".sxc", "application/vnd.sun.xml.calc"),
    (".stc", "application/vnd.sun.xml.calc.template"),
    (".sxd", "application/vnd.sun.xml.draw"),
    (".std", "application/vnd.sun.xml.draw.template"),
    (".sxi", "application/vnd.sun.xml.impress"),
    (".sti", "application/vnd.sun.xml.impress.template"),
    (".sxm", "application/vnd.sun.xml.math"),
    (".sxw", "application/vnd.sun.xml.writer"),
    (".sxg", "application/vnd.sun.xml.writer.global"),
    (".stw", "application/vnd.sun.xml.writer.template"),
    (".sus", "application/vnd.sus-calendar"),
    (".susp", "application/vnd.sus-calendar"),
    (".svd", "application/vnd.svd"),
    (".sis", "application/vnd.symbian.install"),
    (".sisx", "application/vnd.symbian.install"),
    (".xsm", "application/vnd.syncml+xml"),
    (".bdm", "application/vnd.syncml.dm+wbxml"),
    (".xdm", "application/vnd.syncml.dm+xml"),
    (".tao", "application/vnd.tao.intent-module-archive"),
    (".pcap", "application/vnd.tcpdump.pcap"),
    (".cap", "application/vnd.tcpdump.pcap"),
    (".dmp", "application/vnd.tcpdump.pcap"),
    (".tmo", "application/vnd.tmobile-livetv"),
    (".tpt", "application/vnd.trid.tpt"),
    (".mxs", "application/vnd.triscape.mxs"),
    (".tra", "application/vnd.trueapp"),
    (".ufd", "application/vnd.ufdl"),
    (".ufdl", "application/vnd.ufdl"),
    (".utz", "application/vnd.uiq.theme"),
    (".umj", "application/vnd.umajin"),
    (".unityweb", "application/vnd.unity"),
    (".uoml", "application/vnd.uoml+xml"),
    (".vcx", "application/vnd.vcx"),
    (".vsd", "application/vnd.visio"),
    (".vst", "application/vnd.visio"),
    (".vss", "application/vnd.visio"),
    (".vsw", "application/vnd.visio"),
    (".vis", "application/vnd.visionary"),
    (".vsf", "application/vnd.vsf"),
    (".wbxml", "application/vnd.wap.wbxml"),
    (".wmlc", "application/vnd.wap.wmlc"),
    (".wmlsc", "application/vnd.wap.wmlscriptc"),
    (".wtb", "application/vnd.webturbo"),
    (".nbp", "application/vnd.wolfram.player"),
    (".wpd", "application/vnd.wordperfect"),
    (".wqd", "application/vnd.wqd"),
    (".stf", "application/vnd.wt.stf"),
    (".xar", "application/vnd.xara"),
    (".xfdl", "application/vnd.xfdl"),
    (".hvd", "application/vnd.yamaha.hv-dic"),
    (".hvs", "application/vnd.yamaha.hv-script"),
    (".hvp", "application/vnd.yamaha.hv-voice"),
    (".osf", "application/vnd.yamaha.openscoreformat"),
    (".osfpvg", "application/vnd.yamaha.openscoreformat.osfpvg+xml"),
    (".saf", "application/vnd.yamaha.smaf-audio"),
    (".spf", "application/vnd.yamaha.smaf-phrase"),
    (".cmp", "application/vnd.yellowriver-custom-menu"),
    (".zir", "application/vnd.zul"),
    (".zirz", "application/vnd.zul"),
    (".zaz", "application/vnd.zzazz.deck+xml"),
)


def _build() -> dict[str, str]:
    table: dict[str, str] = {}
    for extension, mime in _ENTRIES:
        table.setdefault(extension, mime)
    return table


_TYPES = _build()


def vendor_types() -> dict[str, str]:
    """Return a fresh mapping of file extension to vendor application MIME type."""
    return dict(_TYPES)